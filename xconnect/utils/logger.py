import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = '%(asctime)s|%(levelname)s|%(name)s|%(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name="xconnect", log_dir=None, level="INFO"):
    """
    配置 xconnect 日志

    Args:
        name: logger name; module loggers below it (xconnect.drivers...) propagate here
        log_dir: 日志目录, None 时输出到 stderr
        level: logging level name or number

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # 避免重复添加handler
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        if log_dir:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            # 按天轮转的文件处理器,保留90天
            handler = TimedRotatingFileHandler(
                filename=log_path / f"{name}.log",
                when='midnight',
                interval=1,
                backupCount=90,
                encoding='utf-8'
            )
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
