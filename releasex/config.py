"""
Configuration module for Release Extract.
"""

import json
import os
import tempfile
from typing import Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_CACHE_PATH = os.path.join(tempfile.gettempdir(), "releasex_trends_cache.json")


class DataConfig(BaseModel):
    """
    Configuration for input data.
    """

    directory: str = "./data"  # Directory holding the release files
    extension: str = ".csv"  # Recognised file extension
    delimiter: str = ","  # Column delimiter
    encoding: str = "utf-8-sig"  # File encoding (BOM tolerant)


class CacheConfig(BaseModel):
    """
    Configuration for the trend cache.
    """

    path: str = DEFAULT_CACHE_PATH  # Cache file location
    ttl_seconds: int = 3600  # Cache lifetime


class SearchConfig(BaseModel):
    """
    Configuration for record search.
    """

    max_results: int = 100  # Stop scanning after this many matches


class PerformanceConfig(BaseModel):
    """
    Configuration for performance.
    """

    compact_interval: int = 10000  # Run garbage collection every N records (0 disables)


class ReportConfig(BaseModel):
    """
    Configuration for trend display.
    """

    top_n: int = 10  # Entries shown per ranking (clamped to 5..100)


class LoggingConfig(BaseModel):
    """
    Configuration for logging.
    """

    level: str = "INFO"  # Logging level (DEBUG/INFO/WARN/ERROR)


class Config(BaseModel):
    """
    Main configuration.
    """

    data: DataConfig = Field(default_factory=DataConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: Optional[str] = None) -> Config:
    """
    Load configuration from a file.
    
    Args:
        path: Path to the configuration file
        
    Returns:
        Configuration object
    """
    if path:
        with open(path, "r") as f:
            if path.endswith(".yaml") or path.endswith(".yml"):
                config_dict = yaml.safe_load(f)
            elif path.endswith(".json"):
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported configuration file format: {path}")

        # An empty YAML file loads as None
        return Config(**(config_dict or {}))
    else:
        # Try to load from default locations
        default_locations = [
            "./config.yaml",
            "./config.yml",
            "./config.json",
            os.path.expanduser("~/.config/releasex/config.yaml"),
        ]

        for loc in default_locations:
            if os.path.exists(loc):
                return load_config(loc)

        return Config()
