"""
Pytest configuration and shared fixtures for Calculadora Solar tests.
"""
import pytest
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.services.calculator_service import ConfiguracionSolar


@pytest.fixture
def home_config():
    """Hogar típico: 900 kWh/mes en la región Andina con paneles de 450 W"""
    return ConfiguracionSolar(
        modo="consumo",
        consumo=900,  # kWh/mes
        periodo="mensual",
        region="Andina",
        potencia_panel_w=450,
        perdidas_pct=20,
        dias_autonomia=0,
        dod_pct=80,
        factor_inversor=1.25,
    )


@pytest.fixture
def power_config():
    """Pequeña industria dimensionada por potencia: 10 kW en el Caribe"""
    return ConfiguracionSolar(
        modo="potencia",
        potencia_deseada_kw=10,  # kW
        region="Caribe",
        potencia_panel_w=540,
        perdidas_pct=18,
        dias_autonomia=1,
        dod_pct=80,
        factor_inversor=1.25,
    )


@pytest.fixture
def raw_form_data():
    """Valores crudos tal como llegan del formulario"""
    return {
        'modo': 'consumo',
        'consumo': '900',
        'periodo': 'mensual',
        'potencia_deseada_kw': '',
        'region': 'Andina',
        'potencia_panel_w': 450,
        'perdidas_pct': '20',
        'dias_autonomia': None,
        'dod_pct': 80,
        'factor_inversor': '1,25',
    }
