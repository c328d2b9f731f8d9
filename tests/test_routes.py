from __future__ import annotations

from fastapi.testclient import TestClient

from browserscan.api.modules.scan.schema import ScanRequest
from tests.helpers_scan import GOOGLE_IPV6


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["data"]["env"] == "prod"
    assert body["data"]["version"] == "1.0.0"
    assert body["data"]["timestamp"] > 0


def test_score_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/scan/score",
        json={
            "consistency": {
                "timezone_check": {"status": "FAIL", "evidence": ""},
                "os_check": {"status": "FAIL", "evidence": ""},
            }
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total"] == 70
    assert data["grade"] == "B-"
    assert data["verdict"] == "Moderate Risk"
    assert [item["code"] for item in data["deductions"]] == ["TZ_MISMATCH", "OS_MISMATCH"]


def test_score_endpoint_empty_body(client: TestClient) -> None:
    response = client.post("/api/scan/score", json={})
    assert response.status_code == 200
    assert response.json()["data"]["total"] == 100


def test_leak_test_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/tools/leak-test",
        json={
            "public_ip": "203.0.113.50",
            "webrtc_ips": ["192.168.1.5", "198.51.100.9"],
            "dns_servers": ["192.168.1.1"],
            "ipv6_address": GOOGLE_IPV6,
            "vpn_active": True,
        },
    )
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["webrtc"]["status"] == "LEAK"
    assert data["webrtc"]["leaked_ips"] == ["198.51.100.9"]
    assert data["webrtc"]["local_ips"] == ["192.168.1.5"]
    assert data["dns"]["is_isp_dns"] is True
    assert data["ipv6"]["ipv6_leaked"] is True
    assert data["overall_status"] == "LEAK"
    assert data["overall_risk"] == "high"
    assert len(data["recommendations"]) == 6


def test_ip_classify_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/tools/ip-classify",
        json={"asn": "as9009 M247 Europe SRL", "privacy": {"tor": True}},
    )
    assert response.status_code == 200
    assert response.json()["data"] == {
        "asn": "AS9009",
        "is_proxy": False,
        "is_vpn": False,
        "is_tor": True,
        "is_hosting": False,
        "fraud_score": 90,
    }


def test_report_endpoint(client: TestClient, clean_scan: ScanRequest) -> None:
    response = client.post("/api/scan/report", json=clean_scan.model_dump(mode="json"))
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["meta"]["scan_id"] == "scan-clean"
    assert data["score"]["total"] == 100
    assert data["identity"]["browser"] == "Chrome 120"
    assert data["network"]["leaks"]["webrtc"]["status"] == "SAFE"


def test_minimal_report(client: TestClient) -> None:
    response = client.post("/api/scan/report", json={"ip_intel": {"ip": "203.0.113.1"}})
    assert response.status_code == 200
    data = response.json()["data"]
    assert [item["code"] for item in data["score"]["deductions"]] == ["LANG_WARN"]
    assert data["score"]["total"] == 98
    assert data["identity"]["asn"] == "UNKNOWN"
    assert data["identity"]["location"] == "Unknown"
    assert data["leaks"]["webrtc"]["status"] == "UNKNOWN"


def test_report_rejects_unknown_fields(client: TestClient) -> None:
    response = client.post(
        "/api/scan/report",
        json={"ip_intel": {"ip": "203.0.113.1"}, "canvas_hash": "abc"},
    )
    assert response.status_code == 422


def test_report_requires_ip(client: TestClient) -> None:
    response = client.post("/api/scan/report", json={"ip_intel": {}})
    assert response.status_code == 422


def test_api_key_required(protected_client: TestClient) -> None:
    response = protected_client.post("/api/scan/score", json={})
    assert response.status_code == 401
    assert response.json() == {"status": "error", "message": "Invalid or missing API key"}

    wrong = protected_client.post(
        "/api/scan/score",
        json={},
        headers={"X-API-Key": "nope"},
    )
    assert wrong.status_code == 401


def test_api_key_accepted(protected_client: TestClient) -> None:
    response = protected_client.post(
        "/api/scan/score",
        json={},
        headers={"X-API-Key": "s3cret-key"},
    )
    assert response.status_code == 200


def test_health_is_exempt_from_api_key(protected_client: TestClient) -> None:
    assert protected_client.get("/api/health").status_code == 200
