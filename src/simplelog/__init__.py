"""
simplelog – structured logging façade for Cloud Logging style JSON output.

Import path convention::

    from simplelog import new, LogLevel, LogMode
    from simplelog import CorrelationLogHandler, RequestContext
    from simplelog.config import EnvSettingsLoader, LoggerSettings
"""

from simplelog.caller import CallerLocation, caller_location
from simplelog.context import BACKGROUND, CorrelationContext, RequestContext
from simplelog.handler import CorrelationLogHandler, LogHandler
from simplelog.levels import LogLevel, LogMode, PrintLevel
from simplelog.logger import Logger, new

__version__ = "0.1.0"
__all__ = [
    "BACKGROUND",
    "CallerLocation",
    "CorrelationContext",
    "CorrelationLogHandler",
    "LogHandler",
    "LogLevel",
    "LogMode",
    "Logger",
    "PrintLevel",
    "RequestContext",
    "__version__",
    "caller_location",
    "new",
]
