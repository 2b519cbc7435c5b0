"""InMemoryDeciders: registry contract semantics, copies, watch notifications."""

import asyncio
from datetime import timedelta

import pytest

from autoscaler.application.exceptions import (
    DeciderConflictError,
    DeciderNotFoundError,
    InvalidDeciderSpecError,
)
from autoscaler.application.in_memory_deciders import InMemoryDeciders
from autoscaler.resources.decider import make_decider


@pytest.fixture
def deciders():
    return InMemoryDeciders()


@pytest.fixture
def decider(pa_factory, config):
    return make_decider(pa_factory(), config, "test-revision-metrics")


@pytest.mark.asyncio
async def test_create_then_get(deciders, decider):
    created = await deciders.create(decider)
    assert created.metadata.resource_version == "1"
    assert created.metadata.generation == 1
    assert created.spec == decider.spec
    got = await deciders.get("test-namespace", "test-revision")
    assert got == created


@pytest.mark.asyncio
async def test_create_assigns_uid_when_missing(deciders, decider):
    decider.metadata.uid = None
    created = await deciders.create(decider)
    assert created.metadata.uid


@pytest.mark.asyncio
async def test_get_missing_raises(deciders):
    with pytest.raises(DeciderNotFoundError) as exc_info:
        await deciders.get("ns", "nope")
    assert "ns/nope" in exc_info.value.message


@pytest.mark.asyncio
async def test_create_existing_conflicts(deciders, decider):
    await deciders.create(decider)
    with pytest.raises(DeciderConflictError):
        await deciders.create(decider)


@pytest.mark.asyncio
async def test_create_rejects_invalid_spec(deciders, decider):
    bad = decider.model_copy(deep=True)
    bad.spec.service_name = ""
    with pytest.raises(InvalidDeciderSpecError):
        await deciders.create(bad)
    bad = decider.model_copy(deep=True)
    bad.spec.tick_interval = timedelta(0)
    with pytest.raises(InvalidDeciderSpecError):
        await deciders.create(bad)
    bad = decider.model_copy(deep=True)
    bad.metadata.name = ""
    with pytest.raises(InvalidDeciderSpecError):
        await deciders.create(bad)


@pytest.mark.asyncio
async def test_returned_decider_is_a_copy(deciders, decider):
    created = await deciders.create(decider)
    created.metadata.labels["mutated"] = "yes"
    decider.metadata.labels["mutated"] = "yes"
    got = await deciders.get("test-namespace", "test-revision")
    assert "mutated" not in got.metadata.labels


@pytest.mark.asyncio
async def test_update_bumps_versions(deciders, decider):
    created = await deciders.create(decider)
    created.spec.target_concurrency = 3.0
    updated = await deciders.update(created)
    assert updated.metadata.resource_version == "2"
    assert updated.metadata.generation == 2
    assert updated.spec.target_concurrency == 3.0
    assert (await deciders.get("test-namespace", "test-revision")).spec.target_concurrency == 3.0


@pytest.mark.asyncio
async def test_update_metadata_only_keeps_generation(deciders, decider):
    created = await deciders.create(decider)
    created.metadata.labels["team"] = "a"
    updated = await deciders.update(created)
    assert updated.metadata.generation == 1
    assert updated.metadata.resource_version == "2"


@pytest.mark.asyncio
async def test_update_missing_raises(deciders, decider):
    with pytest.raises(DeciderNotFoundError):
        await deciders.update(decider)


@pytest.mark.asyncio
async def test_update_stale_version_conflicts(deciders, decider):
    created = await deciders.create(decider)
    first = created.model_copy(deep=True)
    first.spec.target_concurrency = 4.0
    await deciders.update(first)
    created.spec.target_concurrency = 6.0
    with pytest.raises(DeciderConflictError):
        await deciders.update(created)


@pytest.mark.asyncio
async def test_delete(deciders, decider):
    await deciders.create(decider)
    await deciders.delete("test-namespace", "test-revision")
    with pytest.raises(DeciderNotFoundError):
        await deciders.get("test-namespace", "test-revision")
    with pytest.raises(DeciderNotFoundError):
        await deciders.delete("test-namespace", "test-revision")


@pytest.mark.asyncio
async def test_watch_receives_keys_in_order(deciders, decider):
    seen: list[str] = []
    deciders.watch(seen.append)
    created = await deciders.create(decider)
    created.spec.target_concurrency = 2.0
    await deciders.update(created)
    await deciders.delete("test-namespace", "test-revision")
    assert seen == ["test-namespace/test-revision"] * 3


@pytest.mark.asyncio
async def test_failed_mutation_does_not_notify(deciders, decider):
    seen: list[str] = []
    deciders.watch(seen.append)
    with pytest.raises(DeciderNotFoundError):
        await deciders.delete("test-namespace", "test-revision")
    assert seen == []


@pytest.mark.asyncio
async def test_failing_watcher_does_not_block_others(deciders, decider, caplog):
    seen: list[str] = []

    def broken(key: str) -> None:
        raise RuntimeError("watcher down")

    deciders.watch(broken)
    deciders.watch(seen.append)
    await deciders.create(decider)
    assert seen == ["test-namespace/test-revision"]
    assert any("watcher failed" in r.getMessage() for r in caplog.records)


@pytest.mark.asyncio
async def test_concurrent_creates_distinct_keys(deciders, pa_factory, config):
    pas = [pa_factory(name=f"rev-{i}") for i in range(10)]
    created = await asyncio.gather(
        *(deciders.create(make_decider(pa, config, f"svc-{i}")) for i, pa in enumerate(pas))
    )
    assert {d.metadata.name for d in created} == {f"rev-{i}" for i in range(10)}
    for i in range(10):
        assert (await deciders.get("test-namespace", f"rev-{i}")).spec.service_name == f"svc-{i}"


@pytest.mark.asyncio
async def test_concurrent_creates_same_key_one_wins(deciders, decider):
    results = await asyncio.gather(
        deciders.create(decider), deciders.create(decider), return_exceptions=True
    )
    assert sum(1 for r in results if isinstance(r, DeciderConflictError)) == 1


@pytest.mark.asyncio
async def test_locks_released_after_create_delete_cycles(deciders, decider):
    for _ in range(50):
        await deciders.create(decider)
        await deciders.delete("test-namespace", "test-revision")
    assert deciders._locks == {}
    assert deciders._lock_users == {}


@pytest.mark.asyncio
async def test_lookup_of_missing_key_leaves_no_lock(deciders):
    for i in range(5):
        with pytest.raises(DeciderNotFoundError):
            await deciders.get("ns", f"missing-{i}")
    assert deciders._locks == {}


@pytest.mark.asyncio
async def test_lock_kept_while_key_stored(deciders, decider):
    await deciders.create(decider)
    assert set(deciders._locks) == {"test-namespace/test-revision"}
    assert deciders._lock_users == {}


@pytest.mark.asyncio
async def test_delete_with_waiting_get_keeps_one_lock(deciders, decider):
    await deciders.create(decider)
    results = await asyncio.gather(
        deciders.delete("test-namespace", "test-revision"),
        deciders.get("test-namespace", "test-revision"),
        deciders.create(decider),
        return_exceptions=True,
    )
    assert results[0] is None
    assert isinstance(results[1], DeciderNotFoundError)
    assert results[2].metadata.resource_version == "1"
    assert set(deciders._locks) == {"test-namespace/test-revision"}
    assert deciders._lock_users == {}
