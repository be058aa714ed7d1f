"""
Simple test cases to verify test configuration.
"""
import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

@pytest.mark.asyncio
async def test_database_session(async_session: AsyncSession):
    """Test that database session works."""
    from sqlalchemy import text
    result = await async_session.execute(text("SELECT 1"))
    assert result.scalar() == 1

@pytest.mark.asyncio
async def test_trace_id_header(client: AsyncClient, sample_categories):
    """Every response carries the request's trace id."""
    response = await client.get("/categorias/1", headers={"X-Trace-ID": "abc-123"})
    assert response.status_code == 200
    assert response.headers["X-Trace-ID"] == "abc-123"

@pytest.mark.asyncio
async def test_openapi_lists_catalog_routes(client: AsyncClient):
    """API documentation is generated for every router."""
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    for path in ("/categorias", "/categorias/produtos", "/produtos/menorpreco", "/api/autoriza/login"):
        assert path in paths

@pytest.mark.asyncio
async def test_sql_driver_creates_tables():
    """create_all builds the catalog and identity tables."""
    from sqlalchemy import inspect
    from framework.database.sql_driver import SQLDriver
    import apps.models  # noqa: F401

    driver = SQLDriver("sqlite+aiosqlite:///:memory:")
    try:
        await driver.create_all()
        async with driver.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    finally:
        await driver.disconnect()

    assert {"categories", "products", "users"} <= set(tables)
