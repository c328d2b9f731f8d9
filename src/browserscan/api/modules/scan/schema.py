from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

CheckStatus = Literal["PASS", "WARN", "FAIL", "UNKNOWN"]
LeakStatus = Literal["SAFE", "LEAK", "WARN", "UNKNOWN"]
RiskLevel = Literal["none", "low", "medium", "high"]


# Evidence


class ConsistencyCheck(BaseModel):
    status: CheckStatus
    evidence: str = ""


class ConsistencySection(BaseModel):
    timezone_check: ConsistencyCheck | None = None
    language_check: ConsistencyCheck | None = None
    os_check: ConsistencyCheck | None = None


class NetworkRisk(BaseModel):
    is_proxy: bool = False
    is_vpn: bool = False
    is_tor: bool = False
    fraud_score: int = Field(default=0, ge=0, le=99)


class ProtocolFingerprints(BaseModel):
    tls_ja3: str = "unknown"
    tls_version: str = "unknown"
    http_version: str = "HTTP/1.1"
    tcp_os_guess: str = "Unknown"


class WebRTCTelemetry(BaseModel):
    status: LeakStatus = "UNKNOWN"
    ip: str = ""
    region: str = ""


class DNSTelemetry(BaseModel):
    status: LeakStatus = "UNKNOWN"
    servers: list[str] = Field(default_factory=list)


class LeakTelemetry(BaseModel):
    webrtc: WebRTCTelemetry | None = None
    dns: DNSTelemetry | None = None


class NetworkSection(BaseModel):
    risk: NetworkRisk | None = None
    protocols: ProtocolFingerprints | None = None
    leaks: LeakTelemetry | None = None


# Scoring


class ScoreDeduction(BaseModel):
    code: str
    score: int = Field(..., le=0)
    desc: str


class ScoreCard(BaseModel):
    total: int = Field(..., ge=0, le=100)
    grade: str
    verdict: str
    deductions: list[ScoreDeduction] = Field(default_factory=list)


# Leak classification


class WebRTCLeakResult(BaseModel):
    status: LeakStatus
    public_ip: str | None = None
    local_ips: list[str] = Field(default_factory=list)
    public_ips: list[str] = Field(default_factory=list)
    leaked_ips: list[str] = Field(default_factory=list)
    risk_level: RiskLevel = "none"
    explanation: str


class DNSLeakResult(BaseModel):
    status: LeakStatus
    detected_servers: list[str] = Field(default_factory=list)
    is_secure_dns: bool = False
    is_isp_dns: bool = False
    risk_level: RiskLevel = "none"
    explanation: str


class IPv6LeakResult(BaseModel):
    status: LeakStatus
    ipv6_address: str | None = None
    ipv6_leaked: bool = False
    risk_level: RiskLevel = "none"
    explanation: str


class LeakTestResult(BaseModel):
    webrtc: WebRTCLeakResult
    dns: DNSLeakResult
    ipv6: IPv6LeakResult
    overall_status: LeakStatus
    overall_risk: RiskLevel
    recommendations: list[str] = Field(default_factory=list)


# Requests


class IpIntelPayload(BaseModel):
    ip: str = Field(..., min_length=1, max_length=64)
    asn: str | None = Field(default=None, max_length=256)
    org: str | None = Field(default=None, max_length=256)
    country_code: str | None = Field(default=None, max_length=8)
    city: str | None = Field(default=None, max_length=128)
    region: str | None = Field(default=None, max_length=128)
    timezone: str | None = Field(default=None, max_length=128)
    privacy: dict[str, Any] | None = None
    is_bogon: bool = False

    model_config = ConfigDict(extra="forbid")


class ClientFingerprint(BaseModel):
    user_agent: str = Field(default="", max_length=2048)
    timezone: str | None = Field(default=None, max_length=128)
    languages: list[str] = Field(default_factory=list, max_length=20)
    webgl_vendor: str | None = Field(default=None, max_length=256)
    webgl_renderer: str | None = Field(default=None, max_length=512)
    webrtc_ips: list[str] = Field(default_factory=list, max_length=64)
    dns_servers: list[str] = Field(default_factory=list, max_length=32)
    ipv6_address: str | None = Field(default=None, max_length=64)
    is_webdriver: bool | None = None
    is_headless: bool | None = None

    model_config = ConfigDict(extra="forbid")


class ServerSignals(BaseModel):
    tls_version: str | None = Field(default=None, max_length=32)
    tls_cipher: str | None = Field(default=None, max_length=128)
    http_protocol: str | None = Field(default=None, max_length=32)
    tcp_os_guess: str | None = Field(default=None, max_length=64)

    model_config = ConfigDict(extra="forbid")


class ScanRequest(BaseModel):
    scan_id: str | None = Field(default=None, max_length=128)
    ip_intel: IpIntelPayload
    client: ClientFingerprint = Field(default_factory=ClientFingerprint)
    server: ServerSignals | None = None
    open_ports: list[int] = Field(default_factory=list, max_length=1024)

    model_config = ConfigDict(extra="forbid")


class ScoreRequest(BaseModel):
    network: NetworkSection | None = None
    consistency: ConsistencySection | None = None
    open_ports: list[int] = Field(default_factory=list, max_length=1024)


class LeakTestRequest(BaseModel):
    public_ip: str = Field(..., min_length=1, max_length=64)
    webrtc_ips: list[str] = Field(default_factory=list, max_length=64)
    dns_servers: list[str] = Field(default_factory=list, max_length=32)
    ipv6_address: str | None = Field(default=None, max_length=64)
    vpn_active: bool = False

    model_config = ConfigDict(extra="forbid")


class IpClassifyRequest(BaseModel):
    asn: str | None = Field(default=None, max_length=256)
    privacy: dict[str, Any] | None = None
    is_bogon: bool = False

    model_config = ConfigDict(extra="forbid")


# Responses


class IpClassifyResponse(BaseModel):
    asn: str
    is_proxy: bool
    is_vpn: bool
    is_tor: bool
    is_hosting: bool
    fraud_score: int = Field(..., ge=0, le=99)


class ScanMeta(BaseModel):
    scan_id: str
    timestamp: int
    version: str


class ScanIdentity(BaseModel):
    ip: str
    asn: str
    location: str
    browser: str
    os: str
    device: str


class ScanReport(BaseModel):
    meta: ScanMeta
    score: ScoreCard
    identity: ScanIdentity
    network: NetworkSection
    consistency: ConsistencySection
    leaks: LeakTestResult


class HealthResponse(BaseModel):
    env: str
    version: str
    timestamp: int
