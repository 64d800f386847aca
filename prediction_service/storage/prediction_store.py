"""
Prediction Store

Persistence collaborator for prediction records.

- InMemoryPredictionStore: development / tests
- RedisPredictionStore: production (JSON per record + per-owner sorted index)
"""

import json
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

import redis

from ..models import PredictionRecord

logger = logging.getLogger(__name__)


class PredictionNotFound(KeyError):
    """No prediction with this id."""
    pass


class PredictionAccessDenied(PermissionError):
    """Prediction belongs to another owner."""
    pass


class PredictionStore(ABC):
    """Base class for prediction persistence."""

    @abstractmethod
    def create_record(self, record: PredictionRecord) -> PredictionRecord:
        """Store a new record and return it with id and created_at set."""
        pass

    @abstractmethod
    def find_by_id(self, prediction_id: str) -> Optional[PredictionRecord]:
        pass

    @abstractmethod
    def find_by_owner(self, owner_id: str, limit: Optional[int] = None) -> List[PredictionRecord]:
        """Owner's records, newest first."""
        pass

    def get_for_owner(self, prediction_id: str, owner_id: str) -> PredictionRecord:
        """
        Fetch a record and check it belongs to owner_id.

        Raises:
            PredictionNotFound: Unknown id
            PredictionAccessDenied: Record owned by someone else
        """
        record = self.find_by_id(prediction_id)
        if record is None:
            raise PredictionNotFound(prediction_id)
        if str(record.owner_id) != str(owner_id):
            raise PredictionAccessDenied(prediction_id)
        return record

    @staticmethod
    def _stamp(record: PredictionRecord) -> PredictionRecord:
        return replace(record, id=uuid.uuid4().hex, created_at=datetime.now(timezone.utc))


class InMemoryPredictionStore(PredictionStore):

    def __init__(self):
        self._records: Dict[str, PredictionRecord] = {}
        self._sequence: Dict[str, int] = {}

    def create_record(self, record: PredictionRecord) -> PredictionRecord:
        stored = self._stamp(record)
        self._records[stored.id] = stored
        self._sequence[stored.id] = len(self._sequence)
        return stored

    def find_by_id(self, prediction_id: str) -> Optional[PredictionRecord]:
        return self._records.get(prediction_id)

    def find_by_owner(self, owner_id: str, limit: Optional[int] = None) -> List[PredictionRecord]:
        if limit is not None and limit <= 0:
            return []
        owned = [r for r in self._records.values() if str(r.owner_id) == str(owner_id)]
        # Insertion sequence breaks ties between identical timestamps
        owned.sort(key=lambda r: (r.created_at, self._sequence[r.id]), reverse=True)
        return owned[:limit] if limit is not None else owned


class RedisPredictionStore(PredictionStore):
    """
    Redis-backed store.

    Keys:
        prediction:<id>               JSON record
        predictions:owner:<owner_id>  sorted set of ids scored by creation time
    """

    def __init__(self, client: "redis.Redis"):
        self.client = client

    @staticmethod
    def _record_key(prediction_id: str) -> str:
        return f"prediction:{prediction_id}"

    @staticmethod
    def _owner_key(owner_id: str) -> str:
        return f"predictions:owner:{owner_id}"

    def create_record(self, record: PredictionRecord) -> PredictionRecord:
        stored = self._stamp(record)
        self.client.set(self._record_key(stored.id), json.dumps(stored.to_dict()))
        self.client.zadd(self._owner_key(stored.owner_id), {stored.id: stored.created_at.timestamp()})
        return stored

    def find_by_id(self, prediction_id: str) -> Optional[PredictionRecord]:
        data = self.client.get(self._record_key(prediction_id))
        return PredictionRecord.from_dict(json.loads(data)) if data else None

    def find_by_owner(self, owner_id: str, limit: Optional[int] = None) -> List[PredictionRecord]:
        if limit is not None and limit <= 0:
            return []
        end = -1 if limit is None else limit - 1
        ids = self.client.zrevrange(self._owner_key(owner_id), 0, end)

        records = []
        for prediction_id in ids:
            record = self.find_by_id(prediction_id)
            if record is not None:
                records.append(record)
        return records


def build_store(settings) -> PredictionStore:
    """
    Redis when enabled and reachable, in-memory otherwise.
    """
    if settings.use_redis:
        try:
            client = redis.Redis(
                host=settings.redis_host,
                port=settings.redis_port,
                decode_responses=True
            )
            client.ping()
            logger.info(f"Using Redis prediction store at {settings.redis_host}:{settings.redis_port}")
            return RedisPredictionStore(client)
        except redis.exceptions.RedisError as e:
            logger.warning(f"Redis unavailable ({e}), using in-memory prediction store")

    return InMemoryPredictionStore()
