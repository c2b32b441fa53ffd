# ============================================================================
# FILE: songbook/core/cache.py
# ============================================================================
import redis
import json
from typing import Optional, Any
import logging

logger = logging.getLogger(__name__)

class RedisCache:
    """Redis cache helper class"""

    def __init__(self, url: Optional[str] = None):
        self.redis_client = None
        if not url:
            logger.info("Redis URL not configured. Caching disabled.")
            return
        try:
            self.redis_client = redis.from_url(url, decode_responses=True)
            self.redis_client.ping()
            logger.info("Redis connection established")
        except Exception as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            self.redis_client = None

    @property
    def enabled(self) -> bool:
        return self.redis_client is not None

    def set_cache(self, key: str, value: Any, expire: int) -> bool:
        """Store a JSON-encoded value that expires after `expire` seconds"""
        if not self.redis_client:
            return False

        try:
            self.redis_client.setex(key, expire, json.dumps(value))
            return True
        except Exception as e:
            logger.error(f"Cache set error: {e}")
            return False

    def get_cache(self, key: str) -> Optional[Any]:
        """Decoded value for a key, None on a miss or when disabled"""
        if not self.redis_client:
            return None

        try:
            raw = self.redis_client.get(key)
        except Exception as e:
            logger.error(f"Cache get error: {e}")
            return None
        return None if raw is None else json.loads(raw)

    def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern, returns the count removed"""
        if not self.redis_client:
            return 0

        try:
            keys = list(self.redis_client.scan_iter(match=pattern))
            if keys:
                self.redis_client.delete(*keys)
            return len(keys)
        except Exception as e:
            logger.error(f"Cache delete error: {e}")
            return 0
