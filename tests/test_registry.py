"""Tests for the bounded device registry."""

import pytest

from config import MAX_DEVICES
from devices import BatteryLevelError, EmbeddedDevice, PersonalComputer, Smartwatch
from registry import DeviceRegistry, RegistryFullError


def _computers(n, prefix="P-"):
    return [PersonalComputer(f"{prefix}{i}", f"PC {i}", operating_system="Linux") for i in range(n)]


@pytest.fixture
def device_file(tmp_path):
    p = tmp_path / "input.txt"
    p.write_text(
        "SW-1,Apple Watch SE2,true,27%\n"
        "P-1,LinuxPC,false,Linux Mint\n"
        "garbage line\n"
        "ED-1,Pi3,192.168.1.44,MD Ltd.Wifi-1\n",
        encoding="utf-8",
    )
    return p


# ===================================================================
# Construction
# ===================================================================
class TestRegistryFromFile:
    def test_loads_valid_rows(self, device_file):
        registry = DeviceRegistry.from_file(device_file)
        assert [d.device_id for d in registry] == ["SW-1", "P-1", "ED-1"]
        assert registry.capacity == MAX_DEVICES

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DeviceRegistry.from_file(tmp_path / "missing.txt")

    def test_overflow_during_load_is_silent(self, tmp_path):
        p = tmp_path / "many.txt"
        p.write_text("\n".join(f"P-{i},PC,true,Linux" for i in range(20)), encoding="utf-8")
        registry = DeviceRegistry.from_file(p)
        assert len(registry) == 15
        assert registry.is_full
        assert registry.devices[-1].device_id == "P-14"

    def test_initial_devices_respect_capacity(self):
        with pytest.raises(RegistryFullError):
            DeviceRegistry(capacity=2, devices=_computers(3))


# ===================================================================
# add / remove / edit
# ===================================================================
class TestRegistryAdd:
    def test_add_appends(self):
        registry = DeviceRegistry(devices=_computers(2))
        watch = Smartwatch("SW-2", "Galaxy Watch", battery_level=50)
        registry.add(watch)
        assert registry.devices[-1] is watch
        assert len(registry) == 3

    def test_add_when_full_raises_and_leaves_collection(self):
        registry = DeviceRegistry(devices=_computers(MAX_DEVICES))
        before = registry.devices
        with pytest.raises(RegistryFullError, match="Storage capacity reached."):
            registry.add(Smartwatch("SW-2", "Galaxy Watch", battery_level=50))
        assert registry.devices == before


class TestRegistryRemove:
    def test_removes_every_match(self):
        registry = DeviceRegistry(devices=[
            PersonalComputer("P-1", "A"),
            PersonalComputer("P-2", "B"),
            PersonalComputer("P-1", "C"),
        ])
        assert registry.remove("P-1") == 2
        assert [d.name for d in registry] == ["B"]

    def test_absent_id_is_noop(self):
        registry = DeviceRegistry(devices=_computers(3))
        assert registry.remove("nope") == 0
        assert len(registry) == 3

    def test_remove_frees_capacity(self):
        registry = DeviceRegistry(capacity=1, devices=_computers(1))
        registry.remove("P-0")
        registry.add(PersonalComputer("P-9", "New"))
        assert registry.get("P-9") is not None


class TestRegistryEdit:
    def test_edits_first_match_in_place(self):
        first = PersonalComputer("P-1", "A")
        second = PersonalComputer("P-1", "B")
        registry = DeviceRegistry(devices=[first, second])

        def install(d):
            d.operating_system = "Windows 11"

        assert registry.edit("P-1", install) is True
        assert first.operating_system == "Windows 11"
        assert second.operating_system is None

    def test_absent_id_is_noop(self):
        registry = DeviceRegistry(devices=_computers(1))
        calls = []
        assert registry.edit("nope", calls.append) is False
        assert calls == []

    def test_validation_error_from_edit_propagates(self):
        registry = DeviceRegistry(devices=[Smartwatch("SW-1", "Watch", battery_level=50)])

        def overcharge(d):
            d.battery_level = 120

        with pytest.raises(BatteryLevelError):
            registry.edit("SW-1", overcharge)
        assert registry.get("SW-1").battery_level == 50

    def test_edit_can_turn_on(self):
        registry = DeviceRegistry(devices=[EmbeddedDevice("ED-1", "Pi", "1.1.1.1", "MD Ltd.")])
        registry.edit("ED-1", lambda d: d.turn_on())
        assert registry.get("ED-1").is_turned_on is True


# ===================================================================
# Enumeration
# ===================================================================
class TestRegistryEnumeration:
    def test_describe_all_in_order(self):
        registry = DeviceRegistry(devices=[
            PersonalComputer("P-1", "LinuxPC", operating_system="Linux Mint"),
            EmbeddedDevice("ED-1", "Pi3", "192.168.1.44", "MD Ltd.Wifi-1"),
        ])
        assert registry.describe_all() == [
            "Personal Computer [ID: P-1, Name: LinuxPC, Turned On: False, OS: Linux Mint]",
            "Embedded Device [ID: ED-1, Name: Pi3, Turned On: False, IP: 192.168.1.44, Network: MD Ltd.Wifi-1]",
        ]

    def test_print_all(self, capsys):
        registry = DeviceRegistry(devices=_computers(2))
        registry.print_all()
        out = capsys.readouterr().out.splitlines()
        assert out == registry.describe_all()

    def test_print_all_with_title(self, capsys):
        registry = DeviceRegistry(devices=_computers(1))
        registry.print_all("Devices:")
        assert capsys.readouterr().out.splitlines()[0] == "Devices:"

    def test_iteration_is_a_snapshot(self):
        registry = DeviceRegistry(devices=_computers(3))
        for d in registry:
            registry.remove(d.device_id)
        assert len(registry) == 0
