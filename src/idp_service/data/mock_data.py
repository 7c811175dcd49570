"""
Built-in dataset served when no database is configured.

Every accessor builds fresh model instances so callers can mutate results
without changing what the next request sees. Deployments are returned
newest first.
"""
from datetime import datetime, timedelta, timezone

from idp_service.domain.models import (
    DeploymentEnvironment,
    DeploymentStatus,
    ServiceStatus,
    ServiceTier,
)
from idp_service.infrastructure.database.models import (
    Deployment,
    OnboardingTemplate,
    Plugin,
    Service,
)


_EPOCH = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


def _ts(hours_ago: float) -> datetime:
    return _EPOCH - timedelta(hours=hours_ago)


_PLUGINS = [
    dict(slug="service-catalog", name="Service Catalog",
         description="Central registry of every service with ownership, tech stack and health.",
         icon="BookOpen", category="Core", enabled=True),
    dict(slug="deployment-monitor", name="Deployment Monitor",
         description="Live view of rollouts across production, staging and development.",
         icon="Rocket", category="Core", enabled=True),
    dict(slug="onboarding-templates", name="Onboarding Templates",
         description="Scaffold new services from curated, production-ready templates.",
         icon="GraduationCap", category="Developer Experience", enabled=True),
    dict(slug="dora-metrics", name="DORA & SPACE Metrics",
         description="Delivery performance and developer productivity dashboards.",
         icon="BarChart3", category="Analytics", enabled=True),
    dict(slug="ai-assistant", name="AI Assistant",
         description="Troubleshoot failed builds and deployments with an AI DevOps assistant.",
         icon="Bot", category="AI", enabled=True),
    dict(slug="cost-insights", name="Cost Insights",
         description="Cloud spend broken down by service and team.",
         icon="DollarSign", category="Analytics", version="0.3.0", enabled=False),
]

_SERVICES = [
    dict(name="Auth Service", slug="auth-service", description="OAuth2/OIDC identity provider and session management.",
         owner="Alice Chen", team="Identity", language="TypeScript", framework="Express",
         status=ServiceStatus.HEALTHY, tier=ServiceTier.CRITICAL, tags=["auth", "security", "oidc"]),
    dict(name="Payment API", slug="payment-api", description="Card and wallet payment processing.",
         owner="Bob Martins", team="Payments", language="Go", framework="gRPC",
         status=ServiceStatus.DEGRADED, tier=ServiceTier.CRITICAL, tags=["payments", "pci"]),
    dict(name="Order Service", slug="order-service", description="Order lifecycle and fulfilment orchestration.",
         owner="Carla Diaz", team="Commerce", language="Java", framework="Spring Boot",
         status=ServiceStatus.HEALTHY, tier=ServiceTier.HIGH, tags=["orders", "commerce"]),
    dict(name="Notification Service", slug="notification-service", description="Email, SMS and push delivery.",
         owner="Deepak Rao", team="Engagement", language="Python", framework="FastAPI",
         status=ServiceStatus.HEALTHY, tier=ServiceTier.MEDIUM, tags=["email", "sms", "push"]),
    dict(name="Search Service", slug="search-service", description="Product and content search backed by OpenSearch.",
         owner="Eva Novak", team="Discovery", language="Kotlin", framework="Ktor",
         status=ServiceStatus.DOWN, tier=ServiceTier.HIGH, tags=["search"]),
    dict(name="Inventory Service", slug="inventory-service", description="Stock levels and warehouse reservations.",
         owner="Farid Haddad", team="Commerce", language="Go", framework="Gin",
         status=ServiceStatus.HEALTHY, tier=ServiceTier.HIGH, tags=["inventory", "commerce"]),
    dict(name="Analytics Pipeline", slug="analytics-pipeline", description="Event ingestion and daily aggregates.",
         owner="Grace Kim", team="Data", language="Python", framework="Airflow",
         status=ServiceStatus.UNKNOWN, tier=ServiceTier.LOW, tags=["data", "batch"]),
    dict(name="Web Frontend", slug="web-frontend", description="Customer-facing web application.",
         owner="Hiro Tanaka", team="Web", language="TypeScript", framework="Next.js",
         status=ServiceStatus.HEALTHY, tier=ServiceTier.HIGH, tags=["frontend", "web"]),
]

# Ordered newest first
_DEPLOYMENTS = [
    dict(service_id=1, version="v2.4.1", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.SUCCESS,
         triggered_by="Alice Chen", commit_hash="a1b2c3d", commit_message="fix: refresh token rotation race",
         duration=42, logs="Build OK\nTests passed (412)\nDeployed to production"),
    dict(service_id=2, version="v1.9.0", environment=DeploymentEnvironment.STAGING, status=DeploymentStatus.FAILED,
         triggered_by="Bob Martins", commit_hash="e4f5a6b", commit_message="feat: wallet tokenization",
         duration=95, logs="Build OK\nIntegration tests FAILED: PaymentGatewayTimeout in test_wallet_capture"),
    dict(service_id=8, version="v5.12.0", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.DEPLOYING,
         triggered_by="ci-bot", commit_hash="c7d8e9f", commit_message="chore: bump design system",
         duration=None, logs="Build OK\nRolling out 3/10 pods"),
    dict(service_id=3, version="v3.2.0", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.SUCCESS,
         triggered_by="Carla Diaz", commit_hash="0a1b2c3", commit_message="feat: split shipments",
         duration=68, logs="Build OK\nMigrations applied\nDeployed to production"),
    dict(service_id=4, version="v1.4.2", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.SUCCESS,
         triggered_by="Deepak Rao", commit_hash="d4e5f6a", commit_message="fix: retry SES throttling",
         duration=37, logs="Build OK\nDeployed to production"),
    dict(service_id=5, version="v0.8.3", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.ROLLED_BACK,
         triggered_by="Eva Novak", commit_hash="b7c8d9e", commit_message="perf: new ranking model",
         duration=120, logs="Deployed to production\nError rate 14% > 5% threshold\nRolled back to v0.8.2"),
    dict(service_id=6, version="v2.0.0", environment=DeploymentEnvironment.STAGING, status=DeploymentStatus.SUCCESS,
         triggered_by="Farid Haddad", commit_hash="f0a1b2c", commit_message="feat: reservation TTLs",
         duration=51, logs="Build OK\nDeployed to staging"),
    dict(service_id=1, version="v2.4.0", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.SUCCESS,
         triggered_by="Alice Chen", commit_hash="3d4e5f6", commit_message="feat: passkey login",
         duration=47, logs="Build OK\nDeployed to production"),
    dict(service_id=7, version="v1.1.0", environment=DeploymentEnvironment.DEVELOPMENT, status=DeploymentStatus.FAILED,
         triggered_by="Grace Kim", commit_hash="7a8b9c0", commit_message="feat: hourly rollups",
         duration=30, logs="Build FAILED\nModuleNotFoundError: No module named 'pyarrow'"),
    dict(service_id=2, version="v1.8.5", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.SUCCESS,
         triggered_by="Bob Martins", commit_hash="1e2f3a4", commit_message="fix: idempotency key collision",
         duration=58, logs="Build OK\nDeployed to production"),
    dict(service_id=8, version="v5.11.2", environment=DeploymentEnvironment.PRODUCTION, status=DeploymentStatus.SUCCESS,
         triggered_by="Hiro Tanaka", commit_hash="5b6c7d8", commit_message="fix: hydration mismatch on cart",
         duration=73, logs="Build OK\nDeployed to production"),
    dict(service_id=3, version="v3.1.4", environment=DeploymentEnvironment.STAGING, status=DeploymentStatus.SUCCESS,
         triggered_by="ci-bot", commit_hash="9e0f1a2", commit_message="chore: dependency updates",
         duration=44, logs="Build OK\nDeployed to staging"),
]

_TEMPLATES = [
    dict(name="Python FastAPI Service", description="Async REST service with SQLAlchemy, Alembic and structured logging.",
         language="Python", framework="FastAPI", category="Backend",
         features=["OpenAPI docs", "Alembic migrations", "pytest", "Dockerfile"], popularity=87),
    dict(name="React Starter", description="React single-page app with TypeScript and Tailwind.",
         language="TypeScript", framework="React", category="Frontend",
         features=["TypeScript", "Tailwind", "Vitest", "ESLint"], popularity=124),
    dict(name="Go gRPC Microservice", description="gRPC service with health checks and Prometheus metrics.",
         language="Go", framework="gRPC", category="Backend",
         features=["Protobuf", "Health checks", "Prometheus", "Helm chart"], popularity=64),
    dict(name="Spring Boot API", description="Java REST API with Spring Data JPA and Flyway.",
         language="Java", framework="Spring Boot", category="Backend",
         features=["Spring Data", "Flyway", "JUnit 5", "Actuator"], popularity=52),
    dict(name="Next.js Web App", description="Server-rendered web application with API routes.",
         language="TypeScript", framework="Next.js", category="Frontend",
         features=["SSR", "App Router", "Playwright", "Tailwind"], popularity=98),
    dict(name="Airflow Data Pipeline", description="Batch pipeline with DAG tests and data quality checks.",
         language="Python", framework="Airflow", category="Data",
         features=["DAG tests", "Great Expectations", "Docker Compose"], popularity=31),
]


def _enum_values(fields: dict) -> dict:
    return {k: (v.value if hasattr(v, "value") else v) for k, v in fields.items()}


def plugins() -> list[Plugin]:
    return [
        Plugin(id=i, author="Platform Team", created_at=_ts(24 * 30), updated_at=_ts(24 * 30), **fields)
        for i, fields in enumerate(_PLUGINS, start=1)
    ]


def services() -> list[Service]:
    return [
        Service(
            id=i,
            repo_url=f"https://git.example.com/platform/{fields['slug']}",
            created_at=_ts(24 * 90),
            updated_at=_ts(24 * 90),
            **_enum_values(fields),
        )
        for i, fields in enumerate(_SERVICES, start=1)
    ]


def deployments() -> list[Deployment]:
    """All mock deployments, newest first (six hours apart)."""
    return [
        Deployment(id=i, created_at=_ts(6 * i), updated_at=_ts(6 * i), **_enum_values(fields))
        for i, fields in enumerate(_DEPLOYMENTS, start=1)
    ]


def templates() -> list[OnboardingTemplate]:
    """Templates in definition order (not sorted)."""
    return [
        OnboardingTemplate(id=i, created_at=_ts(24 * 60), updated_at=_ts(24 * 60), **fields)
        for i, fields in enumerate(_TEMPLATES, start=1)
    ]
