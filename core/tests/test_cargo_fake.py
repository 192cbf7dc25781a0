from pathlib import Path

from cargo_harness.contracts import CargoClient, CargoMetadata
from cargo_harness.toolchain.fakes import FakeCargoClient


def test_fake_cargo_client_records_calls_in_order():
    metadata = CargoMetadata(target_directory="/workspace/target")
    client = FakeCargoClient(metadata=metadata)

    assert client.run(["build", "-p", "demo"], cwd=Path("/workspace")) is True
    assert client.metadata() is metadata

    assert [call.name for call in client.calls] == ["run", "metadata"]
    assert client.commands == [["build", "-p", "demo"]]
    assert client.calls[0].kwargs == {"cwd": Path("/workspace")}


def test_fake_cargo_client_runs_build_hook_only_on_success():
    built: list[list[str]] = []

    ok_client = FakeCargoClient(on_build=lambda args: built.append(list(args)))
    failing_client = FakeCargoClient(
        build_success=False, on_build=lambda args: built.append(list(args))
    )

    assert ok_client.run(["build"]) is True
    assert failing_client.run(["build"]) is False
    assert built == [["build"]]


def test_fake_cargo_client_satisfies_protocol():
    assert isinstance(FakeCargoClient(), CargoClient)
