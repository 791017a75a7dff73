"""hexsearch solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the hexsearch solver."""

    max_workers: int | None = None
    """Maximum number of worker processes to use. If None (default), uses os.cpu_count() - 1."""

    parallel_min_words: int = 20_000
    """Dictionaries with fewer words than this are searched in-process. Default: 20000."""

    chunk_size: int = 2_000
    """Number of words handed to a worker process per task. Default: 2000."""

    prefilter_words: bool = True
    """Whether to skip words that need more copies of a letter than the honeycomb holds.

    Default is True.
    """

    dictionary_path: str = "dictionary.txt"
    """Dictionary used when none is given on the command line."""

    log_dir: str = "logs"
    """Directory where run logs are written. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
