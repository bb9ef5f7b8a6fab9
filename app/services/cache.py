"""
Cache Service Singleton - ESG Scoring Platform
app/services/cache.py

Provides a singleton Redis cache instance and key helpers.
Gracefully handles Redis unavailability.
"""
import logging
import redis
from typing import Optional
from app.services.redis_cache import RedisCache
from app.config import settings

logger = logging.getLogger(__name__)

# Singleton instance
_cache: Optional[RedisCache] = None


def latest_record_key(user_id: str) -> str:
    return f"esg:latest:{user_id}"


def get_cache() -> Optional[RedisCache]:
    """
    Get or create Redis cache instance.

    Returns:
        RedisCache instance if caching is enabled and Redis is available,
        None otherwise (the application keeps working without a cache).
    """
    global _cache
    if not settings.CACHE_ENABLED:
        return None
    if _cache is None:
        try:
            _cache = RedisCache()
            _cache.client.ping()  # Test connection
        except (redis.RedisError, ConnectionError) as e:
            logger.warning(f"Redis unavailable, caching disabled: {e}")
            _cache = None
    return _cache


def reset_cache() -> None:
    """
    Reset the cache singleton.

    Useful for testing or when Redis connection needs to be re-established.
    """
    global _cache
    _cache = None
