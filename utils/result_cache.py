# DEPENDENCIES
import json
import pickle
import hashlib
from typing import Any
from typing import Dict
from typing import Union
from pathlib import Path
from typing import Optional
from datetime import datetime
from datetime import timedelta

from utils.logger import log_info
from utils.logger import log_error
from config.settings import settings


class ResultCache:
    """
    Disk cache for analysis results with TTL: results are stored as opaque pickled values
    """
    def __init__(self, cache_dir: Optional[Union[str, Path]] = None, ttl_seconds: Optional[int] = None):
        self.cache_dir   = Path(cache_dir or settings.CACHE_DIR)
        self.ttl_seconds = settings.CACHE_TTL if ttl_seconds is None else ttl_seconds


    @staticmethod
    def cache_key(file_path: Union[str, Path], options: Dict[str, Any]) -> str:
        """
        Key from source identity, modification time, size and analysis options
        """
        path      = Path(file_path)
        file_stat = path.stat()
        key_data  = f"{path.resolve()}:{file_stat.st_mtime_ns}:{file_stat.st_size}:{json.dumps(options, sort_keys = True, default = str)}"

        return hashlib.sha256(key_data.encode("utf-8")).hexdigest()


    def _get_cache_path(self, cache_key: str) -> Path:
        return self.cache_dir / f"{cache_key}.pkl"


    def _is_expired(self, cache_path: Path) -> bool:
        """
        Check if cache file is missing or older than the TTL
        """
        if not cache_path.exists():
            return True

        file_time = datetime.fromtimestamp(cache_path.stat().st_mtime)

        return (datetime.now() - file_time) > timedelta(seconds = self.ttl_seconds)


    def get(self, cache_key: str) -> Optional[Any]:
        """
        Cached value or None on miss / expiry / unreadable entry
        """
        cache_path = self._get_cache_path(cache_key)

        if self._is_expired(cache_path):
            log_info("Cache miss", cache_key = cache_key)
            return None

        try:
            with open(cache_path, 'rb') as f:
                result = pickle.load(f)

            log_info("Cache hit",
                     cache_key    = cache_key,
                     file_size_kb = round(cache_path.stat().st_size / 1024, 2),
                    )

            return result

        except (OSError, pickle.UnpicklingError, EOFError, AttributeError) as e:
            log_error(e, context = {"component" : "ResultCache", "operation" : "get", "cache_key" : cache_key})

            return None


    def set(self, cache_key: str, value: Any) -> bool:
        """
        Store a value, returns False when the write failed
        """
        cache_path = self._get_cache_path(cache_key)

        try:
            self.cache_dir.mkdir(parents = True, exist_ok = True)

            with open(cache_path, 'wb') as f:
                pickle.dump(value, f)

            log_info("Cache set",
                     cache_key    = cache_key,
                     file_size_kb = round(cache_path.stat().st_size / 1024, 2),
                     ttl_seconds  = self.ttl_seconds,
                    )

            return True

        except (OSError, pickle.PicklingError) as e:
            log_error(e, context = {"component" : "ResultCache", "operation" : "set", "cache_key" : cache_key})

            return False


    def _cache_files(self):
        if not self.cache_dir.exists():
            return []

        return list(self.cache_dir.glob("*.pkl"))


    def clear_expired(self) -> int:
        """
        Delete expired entries, returns the number removed
        """
        expired_count = 0

        for cache_file in self._cache_files():
            if self._is_expired(cache_file):
                cache_file.unlink()
                expired_count += 1

        log_info("Cache cleanup completed", expired_files = expired_count)

        return expired_count


    def clear_all(self) -> int:
        """
        Delete every entry, returns the number removed
        """
        file_count = 0

        for cache_file in self._cache_files():
            cache_file.unlink()
            file_count += 1

        log_info("All cache cleared", files_deleted = file_count)

        return file_count


    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics
        """
        cache_files = self._cache_files()
        total_size  = sum(f.stat().st_size for f in cache_files)

        return {"total_files"   : len(cache_files),
                "expired_files" : len([f for f in cache_files if self._is_expired(f)]),
                "total_size_mb" : round(total_size / (1024 * 1024), 4),
                "cache_dir"     : str(self.cache_dir),
                "ttl_seconds"   : self.ttl_seconds,
               }
