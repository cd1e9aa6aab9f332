import logging, sys

def setup_logging(level: str = "WARNING"):
    logger = logging.getLogger()
    if logger.handlers:  # already configured (pytest, embedding app)
        return
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # stdout carries the command output, keep logs off it
    h = logging.StreamHandler(sys.stderr)
    fmt = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s :: %(message)s"
    )
    h.setFormatter(fmt)
    logger.addHandler(h)
