"""Test config and shared fixtures."""
import pytest
from decimal import Decimal
from typing import AsyncGenerator, List
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from main import app
from framework.database.manager import get_db
from framework.security import CurrentUser, get_current_user
from apps.catalog.models import Category, Product
from apps.identity.models import User


# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_user() -> CurrentUser:
    """Create test user."""
    return CurrentUser(email="test_user@example.com", token_id="test-token")


@pytest.fixture(scope="function")
async def async_session() -> AsyncGenerator[AsyncSession, None]:
    """Create async test database session."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async_session_maker = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


async def _build_client(async_session: AsyncSession, user: CurrentUser = None) -> AsyncClient:
    async def _get_db():
        yield async_session

    app.dependency_overrides[get_db] = _get_db
    if user is not None:
        app.dependency_overrides[get_current_user] = lambda: user

    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def client(
    async_session: AsyncSession,
    test_user: CurrentUser
) -> AsyncGenerator[AsyncClient, None]:
    """Test client with the database and an authenticated user overridden."""
    async with await _build_client(async_session, test_user) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def anonymous_client(
    async_session: AsyncSession
) -> AsyncGenerator[AsyncClient, None]:
    """Test client with the database overridden and real token checks."""
    async with await _build_client(async_session) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def sample_categories(async_session: AsyncSession) -> List[Category]:
    """Create the three seed categories."""
    categories = [
        Category(id=1, name="Bebidas", image_url="bebidas.jpg"),
        Category(id=2, name="Lanches", image_url="lanches.jpg"),
        Category(id=3, name="Sobremesas", image_url="sobremesas.jpg"),
    ]
    async_session.add_all(categories)
    await async_session.commit()
    return categories


@pytest.fixture
async def sample_products(async_session: AsyncSession, sample_categories: List[Category]) -> List[Product]:
    """Create one product per seed category."""
    products = [
        Product(
            id=1, name="Coca-Cola Zero", description="Refrigerante de Cola 350 ml",
            price=Decimal("5.45"), image_url="cocacolazero.jpg", stock=50, category_id=1
        ),
        Product(
            id=2, name="Hamburguer 300", description="Hamburguer com 2 hamburgueres de 150g",
            price=Decimal("32.90"), image_url="hamburguer300.jpg", stock=25, category_id=2
        ),
        Product(
            id=3, name="Sorvete de Amarula", description="Bola de Sorvete de Amarula",
            price=Decimal("3.50"), image_url="sovetebola.jpg", stock=45, category_id=3
        ),
    ]
    async_session.add_all(products)
    await async_session.commit()
    return products


@pytest.fixture
async def many_categories(async_session: AsyncSession) -> List[Category]:
    """Create 23 categories (ids 1..23) for paging tests."""
    categories = [
        Category(id=i, name=f"Category {i}", image_url=f"category{i}.jpg")
        for i in range(1, 24)
    ]
    async_session.add_all(categories)
    await async_session.commit()
    return categories


@pytest.fixture(autouse=True)
async def cleanup_test_data(async_session: AsyncSession, request):
    """
    Fixture to auto-cleanup test data.

    Cleans test data after each test. Disable with pytest option --no-cleanup.
    """
    yield

    if request.config.getoption("--no-cleanup", default=False):
        return

    from sqlmodel import delete

    await async_session.rollback()
    await async_session.execute(delete(Product))
    await async_session.execute(delete(Category))
    await async_session.execute(delete(User))
    await async_session.commit()


def pytest_addoption(parser):
    """Add pytest command-line options."""
    parser.addoption(
        "--no-cleanup",
        action="store_true",
        default=False,
        help="Disable auto-cleanup of test data"
    )
