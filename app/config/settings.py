from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Only needed for maintenance scripts that bypass RLS

    # Session
    session_cookie_name: str = "sb-access-token"
    site_url: str = "http://localhost:3000"  # Front end origin, used for the sign-up confirmation link

    # Sidebar branding when the company_details table is empty or unreachable
    default_company_name: str = "FGS Staffing"
    default_company_email: str = "client@fgstaffing.com"
    default_company_logo: str = "F"

    # App
    app_name: str = "fgs-client-portal"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
