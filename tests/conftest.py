"""Pytest configuration and shared fixtures"""
import pytest
from fastapi.testclient import TestClient

from convert_pluggable.api.conversions import get_conversion_service
from convert_pluggable.catalog import UnitCatalog, get_catalog
from convert_pluggable.common.config import ConverterConfig
from convert_pluggable.conversion import ConversionEngine, ConversionService
from convert_pluggable.main import app


@pytest.fixture
def catalog():
    """Default unit catalog"""
    return UnitCatalog()


@pytest.fixture
def converter_config():
    """Converter configuration with every option at its default"""
    return ConverterConfig(
        CONVERTER_STRICT_ALIASES=False,
        CONVERTER_REAUMUR_FALLBACK=False,
        CONVERTER_TEMPERATURE_COEFFICIENTS="legacy",
        CONVERTER_MAX_PRECISION=50,
    )


@pytest.fixture
def engine(catalog, converter_config):
    """Conversion engine with default behaviour"""
    return ConversionEngine(catalog=catalog, config=converter_config)


@pytest.fixture
def strict_engine(catalog):
    """Conversion engine that rejects ambiguous aliases"""
    config = ConverterConfig(CONVERTER_STRICT_ALIASES=True)
    return ConversionEngine(catalog=catalog, config=config)


@pytest.fixture
def service(engine):
    """Conversion service with a small batch limit"""
    return ConversionService(engine, batch_limit=5)


@pytest.fixture(scope="function")
def client(catalog, service):
    """Create FastAPI test client with isolated catalog and service"""
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_conversion_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
