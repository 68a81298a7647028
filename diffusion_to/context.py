import os

from diffusion_to.logging import setup_logger

DEFAULT_ENDPOINT = "https://diffusion.to"

class DiffusionContext:
    def __init__(self):
        self.log_level = os.getenv("DIFFUSION_LOG_LEVEL", "INFO")
        self.logger = setup_logger(self.log_level)

        self.api_key = os.getenv("DIFFUSION_API_KEY")
        self.endpoint = os.getenv("DIFFUSION_ENDPOINT", DEFAULT_ENDPOINT).rstrip("/")
        self.download_path = os.getenv("DIFFUSION_DOWNLOAD_PATH")
