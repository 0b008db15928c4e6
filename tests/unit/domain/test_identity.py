import threading
import uuid
from concurrent.futures import ThreadPoolExecutor

from nexus_kernel.domain.identity import (
    IdentityGenerator,
    IdentityService,
    UUIDIdentityGenerator,
    get_identity_service,
)


def test_sequential_ids_are_unique():
    generator = UUIDIdentityGenerator()
    ids = {generator.generate() for _ in range(100_000)}
    assert len(ids) == 100_000


def test_concurrent_ids_are_unique():
    service = IdentityService()

    def mint(_):
        return [service.generate() for _ in range(10_000)]

    with ThreadPoolExecutor(max_workers=10) as pool:
        batches = list(pool.map(mint, range(10)))

    ids = {i for batch in batches for i in batch}
    assert len(ids) == 100_000


def test_generator_is_built_once_under_concurrency():
    calls = []
    barrier = threading.Barrier(16)

    def factory():
        calls.append(1)
        return UUIDIdentityGenerator()

    service = IdentityService(factory)
    seen = []

    def first_use():
        barrier.wait()
        seen.append(service.generator)

    threads = [threading.Thread(target=first_use) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(g is seen[0] for g in seen)


def test_default_service_is_a_singleton():
    assert get_identity_service() is get_identity_service()


def test_fallback_uses_time_based_ids(monkeypatch):
    generator = UUIDIdentityGenerator()

    def no_entropy():
        raise NotImplementedError

    monkeypatch.setattr(uuid, "uuid4", no_entropy)
    ids = [generator.generate() for _ in range(1000)]

    assert all(i.version == 1 for i in ids)
    assert len(set(ids)) == 1000


def test_generators_satisfy_protocol():
    assert isinstance(UUIDIdentityGenerator(), IdentityGenerator)
    assert isinstance(IdentityService(), IdentityGenerator)
