"""
Wrapper around logging to provide our own functionality.

This adds the ability to log using str.format() instead of %, and to tag messages with the
file currently being decoded.
"""
from typing import (
    TYPE_CHECKING, Any, Dict, Generator, List, Mapping, Optional, Tuple, Type, Union, cast,
)
from types import TracebackType
import contextlib
import contextvars
import logging
import logging.handlers
import os
import sys


__all__ = ['LoggerAdapter', 'get_logger', 'init_logging', 'context']
# Only generic in stubs!
CTX_STACK: 'contextvars.ContextVar[List[str]]' = contextvars.ContextVar('ktxtools_logger')
ROOT_NAME = 'ktxtools'
# Rotate log files at 10 MB, keeping a few old ones around.
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 3


class LogMessage:
    """Allow using str.format() in logging messages.

    The __str__() method performs the joining.
    """
    fmt: str
    args: Tuple[object, ...]
    kwargs: Dict[str, object]

    def __init__(
        self,
        fmt: str,
        args: Tuple[object, ...],
        kwargs: Dict[str, object],
    ) -> None:
        self.fmt = fmt
        self.args = args
        self.kwargs = kwargs

    def __str__(self) -> str:
        """Format the message. Without arguments braces are left alone."""
        if self.args or self.kwargs:
            return self.fmt.format(*self.args, **self.kwargs)
        return self.fmt


_SysExcInfoType = Union[
    Tuple[Type[BaseException], BaseException, Optional[TracebackType]],
    Tuple[None, None, None]
]
if TYPE_CHECKING:  # Only generic in stubs.
    _AdapterBase = logging.LoggerAdapter[logging.Logger]
else:
    _AdapterBase = logging.LoggerAdapter


class LoggerAdapter(_AdapterBase):
    """Fix loggers to use str.format(), and include the current context."""
    logger: logging.Logger

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger
        logging.LoggerAdapter.__init__(self, logger, extra={})

    def log(
        self,
        level: int,
        msg: Any,
        *args: Any,
        exc_info: Union[None, bool, _SysExcInfoType, BaseException] = None,
        stack_info: bool = False,
        extra: Optional[Mapping[str, object]] = None,
        stacklevel: int = 0,
        **kwargs: Any,
    ) -> None:
        """This version of :external:py:meth:`~logging.Logger.log()` is for :external:py:meth:`str.format()` compatibility.

        The message is wrapped in a :py:class:`LogMessage` object, which is given the
        ``args`` and ``kwargs``.
        """
        if self.isEnabledFor(level):
            try:
                ctx = ', '.join(CTX_STACK.get())
            except LookupError:
                ctx = ''

            new_extra = {} if extra is None else dict(extra)
            new_extra['ktx_context'] = f' ({ctx})' if ctx else ''

            # noinspection PyProtectedMember
            self.logger._log(
                level,
                LogMessage(str(msg), args, kwargs),
                (),  # Formatting is done by LogMessage.
                extra=new_extra,
                exc_info=exc_info,
                stack_info=stack_info,
                # Skip over this method and the adapter's debug()/info()/etc.
                stacklevel=stacklevel + 2,
            )

    def __getattr__(self, attr: str) -> Any:
        """Delegate unknown methods to the logger."""
        return getattr(self.logger, attr)


class Formatter(logging.Formatter):
    """Ensure records from other libraries still have a context set."""
    def format(self, record: logging.LogRecord) -> str:
        record.__dict__.setdefault('ktx_context', '')
        return super().format(record)


def init_logging(
    filename: 'str | os.PathLike[str] | None' = None,
    main_logger: str = '',
) -> logging.Logger:
    """Set up the logger and logging handlers, for applications using the library.

    :param filename: If this is set, all logs will be written to this file as well. Previous \
        logs are rotated out of the way.
    :param main_logger: Specify the name of the logger to produce under the `ktxtools` hierachy.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Put more info in the log file, since it's not onscreen.
    long_log_format = Formatter(
        '[{levelname}]{ktx_context} {module}.{funcName}(): {message}',
        style='{',
    )
    # Console messages, etc.
    short_log_format = Formatter(
        # One letter for level name
        '[{levelname[0]}]{ktx_context} {module}.{funcName}(): {message}',
        style='{',
    )

    if filename is not None:
        folder = os.path.dirname(filename)
        if folder:
            os.makedirs(folder, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(long_log_format)
        logger.addHandler(file_handler)

    if sys.stdout is not None:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(
            logging.DEBUG
            if os.environ.get('KTXTOOLS_DEBUG', '0') == '1' else
            logging.INFO
        )
        stdout_handler.setFormatter(short_log_format)
        if sys.stderr is not None:
            # Warnings go to stderr only, don't duplicate them.
            stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
        logger.addHandler(stdout_handler)

    if sys.stderr is not None:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(short_log_format)
        logger.addHandler(stderr_handler)

    return get_logger(main_logger)


def get_logger(name: str = '') -> logging.Logger:
    """Get the named logger object.

    This puts the logger into the ``ktxtools`` namespace, and wraps it to
    use :external:py:meth:`str.format()` instead of ``%`` formatting.
    Module names from inside the package are used unchanged.
    """
    if not name:  # Allow retrieving the main logger.
        log = logging.getLogger(ROOT_NAME)
    elif name == ROOT_NAME or name.startswith(ROOT_NAME + '.'):
        log = logging.getLogger(name)
    else:
        log = logging.getLogger(f'{ROOT_NAME}.{name}')
    return cast(logging.Logger, LoggerAdapter(log))


@contextlib.contextmanager
def context(name: str) -> Generator[str, None, None]:
    """Context manager to allow specifying additional information for any logs contained in this block.

    The specified string gets included in the log messages.
    """
    try:
        stack = CTX_STACK.get()
    except LookupError:
        stack = []
        CTX_STACK.set(stack)
    stack.append(name)
    try:
        yield name
    finally:
        popped = stack.pop()
        assert popped is name, f'Popped incorrect value: pop({popped!r}) != ctx({name!r})!'
