"""Runtime configuration (domain-mcp.yaml) — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field

PRODUCTION_URL = "https://api.dynadot.com"
SANDBOX_URL = "https://api-sandbox.dynadot.com"


class ServerConfig(BaseModel):
    name: str = "domain-mcp"
    version: str = "1.0.2"
    host: str = "127.0.0.1"
    port: int = 8080


class ApiConfig(BaseModel):
    api_key: str | None = None
    api_key_env: str = "DYNADOT_API_KEY"
    sandbox: bool = False
    timeout: float = Field(default=8.0, gt=0)         # seconds
    max_retries: int = Field(default=3, ge=0)
    retry_delay: float = Field(default=1.0, ge=0)     # backoff base, seconds

    @property
    def base_url(self) -> str:
        return SANDBOX_URL if self.sandbox else PRODUCTION_URL


class AuditConfig(BaseModel):
    enabled: bool = True
    path: str = "domain-mcp-audit.jsonl"
    redact_arguments: bool = False


class RegistrarConfig(BaseModel):
    server: ServerConfig = ServerConfig()
    api: ApiConfig = ApiConfig()
    audit: AuditConfig = AuditConfig()
