"""Shared fixtures: a path routed mock backend and canned vendor payloads."""

import copy

import httpx
import pytest

from pybluelink.config import ClientOptions, Config
from pybluelink.connection import Connection
from pybluelink.const import BRAND_SETTINGS, Brand

HYUNDAI = BRAND_SETTINGS[Brand.HYUNDAI]

VEHICLES_RESPONSE = {
    "retCode": "S",
    "resCode": "0000",
    "resMsg": {
        "vehicles": [
            {
                "vehicleId": "0f3b5b2e-6d4d-4c28-9c6e-6c5b6c1b2a01",
                "vin": "KMHK381GFLU000001",
                "vehicleName": "KONA",
                "type": "EV",
                "nickname": "Kona",
                "master": True,
                "carShare": 1,
                "regDate": "2021-03-14 09:12:44.123",
                "detailInfo": {
                    "saleCarmdlCd": "OS",
                    "bodyType": "1",
                    "inColor": "NNB",
                    "outColor": "SAW",
                    "saleCarmdlEnNm": "KONA EV",
                },
            },
            {
                "vehicleId": "8a1e44c0-2f4b-4b6f-a1d7-3c0a9e6b7f02",
                "vin": "KNACC81GFL5000002",
                "vehicleName": "IONIQ",
                "type": "EV",
            },
        ],
    },
    "msgId": "b2a3bc10-2d6d-11ec-9d3a-4b7f0f3e7a11",
}

STATUS_RESPONSE = {
    "retCode": "S",
    "resCode": "0000",
    "resMsg": {
        "airCtrlOn": False,
        "engine": False,
        "doorLock": True,
        "doorOpen": {"frontLeft": 0, "frontRight": 0, "backLeft": 0, "backRight": 0},
        "trunkOpen": False,
        "airTemp": {"value": "01H", "unit": 0, "hvacTempType": 1},
        "defrost": False,
        "acc": False,
        "evStatus": {
            "batteryCharge": True,
            "batteryStatus": 64,
            "batteryPlugin": 1,
            "remainTime2": {
                "etc1": {"value": 465, "unit": 1},
                "etc2": {"value": 60, "unit": 1},
                "atc": {"value": 255, "unit": 1},
            },
            "drvDistance": [
                {
                    "rangeByFuel": {
                        "evModeRange": {"value": 280, "unit": 1},
                        "totalAvailableRange": {"value": 280, "unit": 1},
                    },
                    "type": 2,
                },
            ],
            "reservChargeInfos": {
                "reservFlag": 0,
                "offpeakPowerInfo": {"offPeakPowerFlag": 0},
                "targetSOClist": [
                    {"targetSOClevel": 80, "plugType": 0},
                    {"targetSOClevel": 100, "plugType": 1},
                ],
            },
        },
        "ign3": False,
        "hoodOpen": False,
        "battery": {"batSoc": 89, "batState": 0},
        "time": "20211015153012",
    },
    "msgId": "c6e1a2f0-2d6d-11ec-9d3a-4b7f0f3e7a11",
}


def status_response(**ev_status):
    """Return a copy of the status payload with evStatus fields replaced."""
    payload = copy.deepcopy(STATUS_RESPONSE)
    payload["resMsg"]["evStatus"].update(ev_status)
    return payload


class MockBackend:
    """Records requests and answers them from a (method, path) table."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status_code=200, json=None, **kwargs):
        self.routes[(method, path)] = (status_code, json, kwargs)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"retCode": "F", "resCode": "4004"})
        status_code, json, kwargs = route
        if json is not None:
            return httpx.Response(status_code, json=json, **kwargs)
        return httpx.Response(status_code, **kwargs)

    @property
    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def backend():
    return MockBackend()


@pytest.fixture
def config():
    return Config("user@example.com", "secret", pin="1234", brand="hyundai")


@pytest.fixture
def connection(backend, config):
    return Connection(config, ClientOptions(transport=httpx.MockTransport(backend)))


@pytest.fixture
def authenticated_connection(connection):
    connection.auth.device_id = "D1"
    connection.auth.access_token = "Bearer T1"
    return connection


@pytest.fixture
def handshake(backend):
    """Register the five responses of a successful login."""
    backend.add(
        "POST",
        "/api/v1/spa/notifications/register",
        json={"retCode": "S", "resCode": "0000", "resMsg": {"deviceId": "D1"}, "msgId": "1"},
    )
    backend.add(
        "GET",
        "/api/v1/user/oauth2/authorize",
        text="<html></html>",
        headers={"Set-Cookie": "account=abc123; Path=/"},
    )
    backend.add("POST", "/api/v1/user/language", text="")
    backend.add(
        "POST",
        "/api/v1/user/signin",
        json={"redirectUrl": f"{HYUNDAI.uri}/api/v1/user/oauth2/redirect?code=C1&state=test"},
    )
    backend.add(
        "POST",
        "/api/v1/user/oauth2/token",
        json={"token_type": "Bearer", "access_token": "T1", "refresh_token": "R1", "expires_in": 86400},
    )
    return backend
