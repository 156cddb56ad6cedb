"""
Configuration management for the Chefs Table application.

Handles environment variables (optionally loaded from a .env file),
database settings, paging limits, and logging configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Application configuration settings"""
    
    # Database settings
    database_path: str = "chefs_table.db"
    seed_sample_data: bool = False
    
    # Paging settings
    default_page_size: int = 10
    max_page_size: int = 100
    
    # HTTP settings
    host: str = "127.0.0.1"
    port: int = 8080
    debug_mode: bool = False
    
    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/chefs_table.log"
    
    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables"""
        return cls(
            # Database
            database_path=os.getenv("CHEFS_DB_PATH", "chefs_table.db"),
            seed_sample_data=os.getenv("CHEFS_SEED_DATA", "false").lower() == "true",
            
            # Paging
            default_page_size=int(os.getenv("CHEFS_DEFAULT_PAGE_SIZE", "10")),
            max_page_size=int(os.getenv("CHEFS_MAX_PAGE_SIZE", "100")),
            
            # HTTP
            host=os.getenv("CHEFS_HOST", "127.0.0.1"),
            port=int(os.getenv("CHEFS_PORT", "8080")),
            debug_mode=os.getenv("CHEFS_DEBUG", "false").lower() == "true",
            
            # Logging
            log_level=os.getenv("CHEFS_LOG_LEVEL", "INFO"),
            log_file=os.getenv("CHEFS_LOG_FILE", "logs/chefs_table.log")
        )
    
    def ensure_directories(self):
        """Create necessary directories"""
        directories = [Path(self.log_file).parent]
        if not self.is_in_memory_database():
            directories.append(Path(self.database_path).parent)
        
        for directory in directories:
            if directory and directory != Path("."):
                directory.mkdir(parents=True, exist_ok=True)
    
    def is_in_memory_database(self) -> bool:
        return self.database_path == ":memory:"
    

# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        load_dotenv()
        _config = Config.from_environment()
        _config.ensure_directories()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
