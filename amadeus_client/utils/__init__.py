from .env import env_flag, load_env_file_if_present

__all__ = ["env_flag", "load_env_file_if_present"]
