"""
ESG Record Repository - ESG Scoring Platform
app/repositories/esg_repository.py

Append-only storage of scored submissions, keyed by submitter and
creation time.

Backends:
    InMemoryESGRepository   - process-local list (development, tests)
    SnowflakeESGRepository  - ESG_RECORDS table, inputs stored as VARIANT
"""

import json
import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from app.models.esg import ESGInput, ESGRecord, ESGScores, TrendPoint
from app.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ESGRecordRepository(ABC):
    """Storage contract for scored submissions."""

    @abstractmethod
    def create(self, user_id: str, esg_input: ESGInput, scores: ESGScores) -> ESGRecord:
        """Store input sections, calculations and scores as a new record."""

    @abstractmethod
    def get_latest(self, user_id: str) -> Optional[ESGRecord]:
        """Most recently created record for user_id, or None."""

    @abstractmethod
    def get_trend(self, user_id: str, limit: int = 10) -> List[TrendPoint]:
        """Up to `limit` most recent records, oldest first."""


class InMemoryESGRepository(ESGRecordRepository):
    """Thread-safe in-process store. Records are never updated or removed."""

    def __init__(self):
        self._records: List[ESGRecord] = []
        self._lock = threading.Lock()
        self._last_created_at: Optional[datetime] = None

    def _next_timestamp(self) -> datetime:
        # Strictly increasing so ordering by created_at is total
        now = datetime.now(timezone.utc)
        if self._last_created_at is not None and now <= self._last_created_at:
            now = self._last_created_at + timedelta(microseconds=1)
        self._last_created_at = now
        return now

    def create(self, user_id: str, esg_input: ESGInput, scores: ESGScores) -> ESGRecord:
        with self._lock:
            record = ESGRecord.from_submission(
                user_id, esg_input, scores, created_at=self._next_timestamp()
            )
            self._records.append(record)
        logger.info(f"Stored ESG record {record.id} for user {user_id}")
        return record

    def _records_for(self, user_id: str) -> List[ESGRecord]:
        with self._lock:
            records = [r for r in self._records if r.user_id == user_id]
        return sorted(records, key=lambda r: r.created_at)

    def get_latest(self, user_id: str) -> Optional[ESGRecord]:
        records = self._records_for(user_id)
        return records[-1] if records else None

    def get_trend(self, user_id: str, limit: int = 10) -> List[TrendPoint]:
        if limit <= 0:
            return []
        return [r.to_trend_point() for r in self._records_for(user_id)[-limit:]]

    def count(self) -> int:
        with self._lock:
            return len(self._records)


class SnowflakeESGRepository(BaseRepository, ESGRecordRepository):
    """Repository for ESG_RECORDS in Snowflake."""

    TABLE_NAME = "ESG_RECORDS"

    CREATE_TABLE_SQL = f"""
        CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
            ID VARCHAR(36) PRIMARY KEY,
            USER_ID VARCHAR(255) NOT NULL,
            INPUT VARIANT NOT NULL,
            ENVIRONMENTAL_CALCULATIONS VARIANT NOT NULL,
            ENVIRONMENTAL_SCORE FLOAT NOT NULL,
            SOCIAL_SCORE FLOAT NOT NULL,
            GOVERNANCE_SCORE FLOAT NOT NULL,
            OVERALL_ESG_SCORE FLOAT NOT NULL,
            CREATED_AT TIMESTAMP_TZ NOT NULL
        )
    """

    SELECT_COLUMNS = """
        ID, USER_ID, INPUT, ENVIRONMENTAL_CALCULATIONS,
        ENVIRONMENTAL_SCORE, SOCIAL_SCORE, GOVERNANCE_SCORE,
        OVERALL_ESG_SCORE, CREATED_AT
    """

    def ensure_table(self) -> None:
        self.execute_query(self.CREATE_TABLE_SQL, commit=True)

    def create(self, user_id: str, esg_input: ESGInput, scores: ESGScores) -> ESGRecord:
        """
        Insert a new record.

        PARSE_JSON is not allowed in a VALUES clause, so the insert uses
        INSERT ... SELECT.
        """
        record = ESGRecord.from_submission(user_id, esg_input, scores)

        sql = f"""
            INSERT INTO {self.TABLE_NAME} (ID, USER_ID, INPUT, ENVIRONMENTAL_CALCULATIONS,
                                          ENVIRONMENTAL_SCORE, SOCIAL_SCORE, GOVERNANCE_SCORE,
                                          OVERALL_ESG_SCORE, CREATED_AT)
            SELECT %s, %s, PARSE_JSON(%s), PARSE_JSON(%s), %s, %s, %s, %s, %s
        """
        params = (
            self.uuid_to_str(record.id),
            user_id,
            esg_input.model_dump_json(by_alias=True),
            scores.environmental_calculations.model_dump_json(by_alias=True),
            scores.environmental_score,
            scores.social_score,
            scores.governance_score,
            scores.overall_esg_score,
            record.created_at,
        )

        self.execute_query(sql, params, commit=True)
        logger.info(f"Stored ESG record {record.id} for user {user_id}")
        return record

    def get_latest(self, user_id: str) -> Optional[ESGRecord]:
        sql = f"""
            SELECT {self.SELECT_COLUMNS}
            FROM {self.TABLE_NAME}
            WHERE USER_ID = %s
            ORDER BY CREATED_AT DESC
            LIMIT 1
        """
        row = self.execute_query(sql, (user_id,), fetch_one=True)
        if not row:
            return None
        return self._row_to_record(row)

    def get_trend(self, user_id: str, limit: int = 10) -> List[TrendPoint]:
        if limit <= 0:
            return []
        sql = f"""
            SELECT ENVIRONMENTAL_SCORE, SOCIAL_SCORE, GOVERNANCE_SCORE,
                   OVERALL_ESG_SCORE, CREATED_AT
            FROM {self.TABLE_NAME}
            WHERE USER_ID = %s
            ORDER BY CREATED_AT DESC
            LIMIT %s
        """
        rows = self.execute_query(sql, (user_id, limit), fetch_all=True) or []

        points = []
        for raw in reversed(rows):
            row = self.row_to_dict(raw)
            created_at = self.normalize_timestamp(row["created_at"])
            points.append(TrendPoint(
                date=created_at.date().isoformat(),
                environmental=row["environmental_score"],
                social=row["social_score"],
                governance=row["governance_score"],
                overall=row["overall_esg_score"],
            ))
        return points

    def _row_to_record(self, raw: Dict[str, Any]) -> ESGRecord:
        row = self.row_to_dict(raw)
        data: Dict[str, Any] = dict(self._load_variant(row["input"]))
        data.update(
            id=self.str_to_uuid(row["id"]),
            user_id=row["user_id"],
            environmental_calculations=self._load_variant(row["environmental_calculations"]),
            environmental_score=row["environmental_score"],
            social_score=row["social_score"],
            governance_score=row["governance_score"],
            overall_esg_score=row["overall_esg_score"],
            created_at=self.normalize_timestamp(row["created_at"]),
        )
        return ESGRecord.model_validate(data)

    @staticmethod
    def _load_variant(value: Any) -> Dict[str, Any]:
        # The connector returns VARIANT columns as JSON text
        if isinstance(value, str):
            return json.loads(value)
        return value
