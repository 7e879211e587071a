"""
Redis-based rate limiting for API endpoints.
Fixed-window counter per client IP and view, disabled unless
settings.RATE_LIMIT_ENABLED is true.
"""
import logging

import redis
from django.conf import settings
from django.http import JsonResponse
from rest_framework import status

logger = logging.getLogger(__name__)

UNSAFE_METHODS = ('POST', 'PUT', 'PATCH', 'DELETE')

_redis_client = None


def get_redis_client():
    """Create the Redis client on first use; None if Redis is unreachable."""
    global _redis_client
    if _redis_client is None:
        try:
            client = redis.Redis.from_url(
                settings.REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=5
            )
            client.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(f"Redis connection failed: {e}. Rate limiting is skipped.")
            return None
        _redis_client = client
    return _redis_client


def get_client_ip(request):
    """Extract client IP address from request."""
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR', 'unknown')
    return ip


def check_rate_limit(key, max_requests, window_seconds):
    """
    Count one request against key.

    Returns:
        Tuple of (current count, seconds until the window resets), or None
        when Redis is unavailable (fail open).
    """
    client = get_redis_client()
    if client is None:
        return None

    try:
        current_count = client.incr(key)
        # Set expiry on first request of the window
        if current_count == 1:
            client.expire(key, window_seconds)
        ttl = client.ttl(key)
    except redis.RedisError as e:
        logger.error(f"Redis error in rate limiting: {e}")
        return None

    return current_count, ttl


class RateLimitMixin:
    """
    Limits write requests (POST, PUT, PATCH, DELETE) on a class-based view.
    Reads are never limited.

    Usage:
        class MyView(RateLimitMixin, APIView):
            rate_limit_max_requests = 60
            rate_limit_window_seconds = 60
    """
    rate_limit_max_requests = 60
    rate_limit_window_seconds = 60

    def dispatch(self, request, *args, **kwargs):
        if not getattr(settings, 'RATE_LIMIT_ENABLED', False) or request.method not in UNSAFE_METHODS:
            return super().dispatch(request, *args, **kwargs)

        max_requests = self.rate_limit_max_requests
        window_seconds = self.rate_limit_window_seconds
        key = f"rate_limit:{self.__class__.__name__}:{get_client_ip(request)}"

        counted = check_rate_limit(key, max_requests, window_seconds)
        if counted is None:
            return super().dispatch(request, *args, **kwargs)

        current_count, ttl = counted
        if current_count > max_requests:
            logger.warning(f"Rate limit exceeded for {key}")
            return JsonResponse(
                {
                    'error': 'Rate limit exceeded',
                    'detail': f'Maximum {max_requests} requests per {window_seconds} seconds allowed.',
                    'retry_after': ttl
                },
                status=status.HTTP_429_TOO_MANY_REQUESTS,
                headers={
                    'X-RateLimit-Limit': str(max_requests),
                    'X-RateLimit-Remaining': '0',
                    'X-RateLimit-Reset': str(ttl),
                    'Retry-After': str(ttl)
                }
            )

        response = super().dispatch(request, *args, **kwargs)
        response['X-RateLimit-Limit'] = str(max_requests)
        response['X-RateLimit-Remaining'] = str(max(0, max_requests - current_count))
        response['X-RateLimit-Reset'] = str(ttl)
        return response
