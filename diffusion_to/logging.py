import logging

def setup_logger(level: str = "INFO"):
    logger = logging.getLogger("diffusion_to")

    logger.setLevel(level.upper())

    # Building several contexts in one process must not stack handlers.

    if not logger.handlers:
        formatter = logging.Formatter(fmt='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

        handler = logging.StreamHandler()

        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger
