from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from authgate.adapter.memory import InMemoryUnitOfWork, MemoryDatabase
from authgate.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from authgate.api.error import UnsupportedBackendError

SUPPORTED_BACKENDS = ("sql", "memory")

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

memory_database = MemoryDatabase()


def check_store_backend(backend: str) -> None:
    if backend not in SUPPORTED_BACKENDS:
        raise UnsupportedBackendError(backend)


async def get_unit_of_work():
    backend = ApplicationConfig.STORE_BACKEND
    if backend == "memory":
        yield InMemoryUnitOfWork(memory_database)
    elif backend == "sql":
        async with AsyncSessionLocal() as session:
            yield SqlAlchemyUnitOfWork(session)
    else:
        raise UnsupportedBackendError(backend)
