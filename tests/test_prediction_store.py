import logging
import time
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest
import redis

from prediction_service.config import Settings
from prediction_service.models import PredictionRecord, RiskAssessment, RiskTier, VitalSigns
from prediction_service.storage.prediction_store import (
    InMemoryPredictionStore,
    PredictionAccessDenied,
    PredictionNotFound,
    RedisPredictionStore,
    build_store,
)


class FakeRedis:
    """Dict-backed stand-in for the handful of redis commands the store uses."""

    def __init__(self):
        self.values = {}
        self.sorted_sets = {}

    def set(self, key, value):
        self.values[key] = value

    def get(self, key):
        return self.values.get(key)

    def zadd(self, key, mapping):
        self.sorted_sets.setdefault(key, {}).update(mapping)

    def zrevrange(self, key, start, end):
        members = sorted(self.sorted_sets.get(key, {}).items(), key=lambda kv: kv[1], reverse=True)
        ids = [member for member, _ in members]
        return ids[start:] if end == -1 else ids[start:end + 1]


def make_record(owner_id="user-1", disease="Common Cold", risk=RiskTier.LOW):
    return PredictionRecord(
        owner_id=owner_id,
        symptoms=["cough", "sneezing"],
        vital_signs=VitalSigns(temperature=38.9, blood_pressure="120/80"),
        predicted_disease=disease,
        confidence=70,
        mortality_risk=RiskAssessment(risk=risk, probability=18.4, risk_score=5),
        recommendations=["Rest"],
    )


@pytest.fixture(params=["memory", "redis"])
def any_store(request):
    if request.param == "memory":
        return InMemoryPredictionStore()
    return RedisPredictionStore(FakeRedis())


def test_create_assigns_id_and_timestamp(any_store):
    stored = any_store.create_record(make_record())
    assert stored.id
    assert stored.created_at is not None
    assert any_store.find_by_id(stored.id) == stored


def test_find_by_id_missing(any_store):
    assert any_store.find_by_id("missing") is None


def test_find_by_owner_newest_first(any_store):
    first = any_store.create_record(make_record(disease="Influenza"))
    time.sleep(0.002)
    second = any_store.create_record(make_record(disease="Asthma"))
    time.sleep(0.002)
    third = any_store.create_record(make_record(disease="Migraine"))
    any_store.create_record(make_record(owner_id="user-2"))

    records = any_store.find_by_owner("user-1")
    assert [r.id for r in records] == [third.id, second.id, first.id]
    assert [r.id for r in any_store.find_by_owner("user-1", limit=2)] == [third.id, second.id]
    assert any_store.find_by_owner("nobody") == []


def test_find_by_owner_non_positive_limit(any_store):
    any_store.create_record(make_record())
    assert any_store.find_by_owner("user-1", limit=0) == []
    assert any_store.find_by_owner("user-1", limit=-1) == []


def test_get_for_owner(any_store):
    stored = any_store.create_record(make_record())
    assert any_store.get_for_owner(stored.id, "user-1") == stored

    with pytest.raises(PredictionAccessDenied):
        any_store.get_for_owner(stored.id, "user-2")
    with pytest.raises(PredictionNotFound):
        any_store.get_for_owner("missing", "user-1")


def test_in_memory_orders_by_timestamp():
    store = InMemoryPredictionStore()
    older = store.create_record(make_record())
    newer = store.create_record(make_record())
    # Force the first record to be the most recent
    store._records[older.id].created_at = datetime.now(timezone.utc) + timedelta(days=1)

    assert [r.id for r in store.find_by_owner("user-1")] == [older.id, newer.id]


def test_redis_round_trip_keeps_types():
    client = FakeRedis()
    stored = RedisPredictionStore(client).create_record(make_record(risk=RiskTier.HIGH))

    loaded = RedisPredictionStore(client).find_by_id(stored.id)
    assert loaded.mortality_risk.risk is RiskTier.HIGH
    assert loaded.vital_signs.blood_pressure == "120/80"
    assert loaded.created_at == stored.created_at
    assert f"prediction:{stored.id}" in client.values
    assert stored.id in client.sorted_sets["predictions:owner:user-1"]


def test_build_store_falls_back_when_redis_unreachable(caplog):
    settings = Settings(use_redis=True, redis_host="cache", redis_port=6380)
    with patch("prediction_service.storage.prediction_store.redis.Redis") as mock_redis:
        mock_redis.return_value.ping.side_effect = redis.exceptions.ConnectionError("refused")
        with caplog.at_level(logging.WARNING):
            store = build_store(settings)

    assert isinstance(store, InMemoryPredictionStore)
    assert "Redis unavailable" in caplog.text


def test_build_store_uses_reachable_redis():
    settings = Settings(use_redis=True, redis_host="cache", redis_port=6380)
    with patch("prediction_service.storage.prediction_store.redis.Redis") as mock_redis:
        store = build_store(settings)

    assert isinstance(store, RedisPredictionStore)
    assert store.client is mock_redis.return_value
    mock_redis.assert_called_once_with(host="cache", port=6380, decode_responses=True)
    mock_redis.return_value.ping.assert_called_once_with()


def test_build_store_skips_redis_when_disabled():
    with patch("prediction_service.storage.prediction_store.redis.Redis") as mock_redis:
        store = build_store(Settings(use_redis=False))

    assert isinstance(store, InMemoryPredictionStore)
    mock_redis.assert_not_called()
