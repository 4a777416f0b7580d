import pytest

from src.attendance_portal.attendance_portal.container import GatewaySettings, build_container, build_gateway
from src.attendance_portal.attendance_portal.core.enums import GatewayMode
from src.attendance_portal.attendance_portal.core.exceptions import ValidationError
from src.attendance_portal.attendance_portal.gateway.http_gateway import HttpGateway
from src.attendance_portal.attendance_portal.gateway.memory_gateway import InMemoryGateway, SeedGateway


def test_settings_from_dict_defaults():
    s = GatewaySettings.from_dict({"mode": "HTTP"})

    assert s.mode == GatewayMode.HTTP
    assert s.timeout == 10.0
    assert s.seed_path is None


def test_unknown_mode_rejected():
    with pytest.raises(ValidationError):
        GatewaySettings.from_dict({"mode": "ftp"})


@pytest.mark.parametrize(
    "mode, expected",
    [("http", HttpGateway), ("memory", InMemoryGateway), ("seed", SeedGateway)],
)
def test_build_gateway_by_mode(mode, expected):
    assert isinstance(build_gateway(GatewaySettings.from_dict({"mode": mode})), expected)


def test_container_refresh_loads_snapshots():
    container = build_container(gateway_config={"mode": "memory"})
    container.refresh()

    assert container.users.get_by_id("emp-1").name == "Sunita Sharma"
    assert len(container.attendance_store) == 2
    assert len(container.inventory.list_all()) == 2


def test_new_session_is_fresh_each_time():
    container = build_container(gateway_config={"mode": "memory"})
    container.refresh()

    first = container.new_session()
    first.login("emp-1")

    assert container.new_session().current_user is None
    assert first.current_user.user_id == "emp-1"


def test_container_close_closes_gateway():
    gateway = build_gateway(GatewaySettings.from_dict({"mode": "http", "base_url": "http://testserver/api"}))
    container = build_container(gateway=gateway)

    container.close()

    assert gateway._client.is_closed
