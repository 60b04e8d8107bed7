"""
Azure Functions entry point for the Grid Asset Registry.

Serves the Lifecycle API used by the admin console: list, create, update,
soft delete, restore and permanently delete grid-infrastructure assets.

Architecture:
    HTTP -> GridAssetsTrigger -> AuthorizationGate -> GridAssetService
                                                          |
                                          GridAssetRepository -> StoreHandle
                                                                 (psycopg_pool)

Exports:
    app: Azure Function App instance
    store: Process-wide asset store handle

Endpoints:
    GET    /api/health       - Health check with component status
    GET    /api/grid-assets  - List assets (?includeDeleted=true for all)
    POST   /api/grid-assets  - Create asset
    PATCH  /api/grid-assets  - Update / restore asset
    DELETE /api/grid-assets  - Soft delete or purge ({"permanent": true})

Store Lifecycle:
    The store handle is opened once here, at process start, and closed at
    interpreter exit. Repositories receive it by injection.

Environment Variables:
    POSTGIS_HOST, POSTGIS_DATABASE: Asset store location (required)
    POSTGIS_USER, POSTGIS_PASSWORD: Password auth (local development)
    USE_MANAGED_IDENTITY: Passwordless auth via azure-identity
    DB_ENSURE_SCHEMA: Create the grid_assets table at start if missing
    ADMIN_ROLE: Role required for every grid asset call (default ADMIN)
"""

import atexit

import azure.functions as func

from config import get_config
from infrastructure import RepositoryFactory
from services.authorization import AuthorizationGate
from services.grid_asset_service import GridAssetService
from triggers.grid_assets import GridAssetsTrigger, bp as grid_assets_bp, configure_grid_assets
from triggers.health import HealthCheckTrigger
from util_logger import LoggerFactory, ComponentType, LogLevel

logger = LoggerFactory.create_logger(ComponentType.TRIGGER, "FunctionApp")

# ============================================================================
# STORE HANDLE - opened at process start, closed at shutdown
# ============================================================================

config = get_config()
LoggerFactory.set_default_level(
    LogLevel.DEBUG if config.debug_mode else LogLevel.from_string(config.log_level)
)

store = RepositoryFactory.create_store_handle(config.database).open()
atexit.register(store.close)

grid_asset_repository = RepositoryFactory.create_grid_asset_repository(store)
if config.database.ensure_schema_on_start:
    grid_asset_repository.ensure_table()

# ============================================================================
# SERVICES AND TRIGGERS
# ============================================================================

gate = AuthorizationGate(config.auth.admin_role)
grid_asset_service = GridAssetService(grid_asset_repository, gate)

configure_grid_assets(GridAssetsTrigger(grid_asset_service, config.auth, gate))
health_check_trigger = HealthCheckTrigger(store)

# Initialize function app with HTTP auth level
app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

app.register_functions(grid_assets_bp)

logger.info(f"✅ Grid asset registry started (environment={config.environment})")


@app.route(route="health", methods=["GET"])
def health(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint using HTTP trigger base class."""
    return health_check_trigger.handle_request(req)
