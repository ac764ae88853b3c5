"""Logging — настройка structlog для приложения

Движок сам логирование не настраивает: модули только эмитят события
(validation.rejected, accuracy.insufficient, catalog.loaded) на уровне DEBUG.
Приложение вызывает configure_logging() один раз при старте.

Режимы вывода (оба в stderr):
- Console (по умолчанию): человекочитаемый вывод, цвет только для TTY
- JSON (log_json=True): одна JSON строка на событие
"""

import logging
import sys

import structlog

# Корневой логгер пакета (модули используют structlog.get_logger(__name__))
PACKAGE_LOGGER = "src"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """
    Настройка processors structlog и вывода через stdlib logging.

    Повторный вызов заменяет handler корневого логгера, а не добавляет новый.

    Args:
        verbose: DEBUG для логгера пакета (отказы, загрузка каталога,
            недостаточная точность); иначе только WARNING и выше
        log_json: JSONRenderer вместо ConsoleRenderer
    """
    package_level = logging.DEBUG if verbose else logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(package_level)
