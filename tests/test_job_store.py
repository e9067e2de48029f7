"""Tests for the in-memory job registry."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from siteforge.jobs import InMemoryJobStore, JobStatus


class TestJobStore:
    @pytest.fixture
    def job_store(self):
        return InMemoryJobStore()

    def test_create_job(self, job_store):
        job = job_store.create("Green Cafe", "Restaurant")
        assert job.job_id.startswith("job_")
        assert job.status == JobStatus.PENDING
        assert job.business_name == "Green Cafe"
        assert job_store.get(job.job_id) == job
        assert job_store.count() == 1

    def test_ids_are_unique(self, job_store):
        ids = {job_store.create("A", "B").job_id for _ in range(500)}
        assert len(ids) == 500

    def test_take_claims_once(self, job_store):
        job = job_store.create("A", "B")
        taken = job_store.take(job.job_id)
        assert taken is not None
        assert taken.status == JobStatus.STREAMING
        assert job_store.take(job.job_id) is None

    def test_take_unknown_returns_none(self, job_store):
        assert job_store.take("job_missing") is None

    def test_delete_is_idempotent(self, job_store):
        job = job_store.create("A", "B")
        assert job_store.delete(job.job_id) is True
        assert job_store.delete(job.job_id) is False
        assert job_store.get(job.job_id) is None
        assert job_store.take(job.job_id) is None

    def test_concurrent_create_and_take(self, job_store):
        with ThreadPoolExecutor(max_workers=8) as pool:
            jobs = list(pool.map(lambda i: job_store.create(f"biz {i}", "type"), range(200)))
        assert job_store.count() == 200
        with ThreadPoolExecutor(max_workers=8) as pool:
            claims = list(pool.map(job_store.take, [j.job_id for j in jobs] * 2))
        assert sum(1 for c in claims if c is not None) == 200
