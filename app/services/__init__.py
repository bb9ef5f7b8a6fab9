"""
Services module for the ESG Scoring Platform.

    esg_service.py   - Submission orchestration (validate, score, persist)
    cache.py         - Redis cache singleton and key helpers
    redis_cache.py   - Pydantic-aware Redis wrapper
    snowflake.py     - Snowflake connection factory
"""
