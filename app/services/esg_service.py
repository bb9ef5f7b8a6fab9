"""
ESG Service - submission orchestrator
app/services/esg_service.py

Submit flow:
  1. Check every required section/field is present (names the first gap)
  2. Parse into ESGInput (types and ranges)
  3. Run ESGCalculator.compute_scores
  4. Persist input + calculations + scores via the repository
  5. Invalidate the submitter's cached "latest" record

Reads:
  - latest: Redis cache first, repository on miss
  - trend:  repository only
"""

import logging
from typing import Any, List, Mapping, Optional

import redis
from pydantic import ValidationError

from app.models.esg import ESGInput, ESGRecord, ESGScores, TrendPoint
from app.repositories.esg_repository import ESGRecordRepository
from app.scoring.esg_calculator import ESGCalculator
from app.scoring.validation import validate_required_fields
from app.services.cache import latest_record_key
from app.services.redis_cache import RedisCache

logger = logging.getLogger(__name__)


class ESGService:
    """Validate, score and store ESG submissions."""

    def __init__(
        self,
        repository: ESGRecordRepository,
        calculator: Optional[ESGCalculator] = None,
        cache: Optional[RedisCache] = None,
        cache_ttl: int = 300,
    ):
        self.repository = repository
        self.calculator = calculator or ESGCalculator()
        self.cache = cache
        self.cache_ttl = cache_ttl

    def parse(self, payload: Mapping[str, Any]) -> ESGInput:
        """
        Raises:
            MissingSectionException / MissingFieldException: required data absent
            pydantic.ValidationError: wrong type or out of range
        """
        validate_required_fields(payload)
        return ESGInput.model_validate(payload)

    def score(self, payload: Mapping[str, Any]) -> ESGScores:
        return self.calculator.compute_scores(self.parse(payload))

    def submit(self, user_id: str, payload: Mapping[str, Any]) -> ESGRecord:
        esg_input = self.parse(payload)
        scores = self.calculator.compute_scores(esg_input)
        record = self.repository.create(user_id, esg_input, scores)

        self._invalidate_latest(user_id)

        logger.info(
            f"ESG submission {record.id} user={user_id} "
            f"E={scores.environmental_score:.2f} S={scores.social_score:.2f} "
            f"G={scores.governance_score:.2f} overall={scores.overall_esg_score:.2f}"
        )
        return record

    def get_latest(self, user_id: str) -> Optional[ESGRecord]:
        key = latest_record_key(user_id)
        if self.cache is not None:
            try:
                cached = self.cache.get(key, ESGRecord)
                if cached is not None:
                    return cached
            except (redis.RedisError, ValidationError) as e:
                logger.warning(f"Cache read failed for {key}: {e}")

        record = self.repository.get_latest(user_id)
        if record is not None and self.cache is not None and self.cache_ttl > 0:
            try:
                self.cache.set(key, record, self.cache_ttl)
            except redis.RedisError as e:
                logger.warning(f"Cache write failed for {key}: {e}")
        return record

    def get_trend(self, user_id: str, limit: int) -> List[TrendPoint]:
        return self.repository.get_trend(user_id, limit)

    def _invalidate_latest(self, user_id: str) -> None:
        if self.cache is None:
            return
        key = latest_record_key(user_id)
        try:
            self.cache.delete(key)
        except redis.RedisError as e:
            logger.warning(f"Cache invalidation failed for {key}: {e}")
