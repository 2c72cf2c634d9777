"""
Unit tests for helpers.py - Form coercion, advisory validation and formatting.
"""
import math
from dataclasses import replace

import pytest

from src.services.calculator_service import ConfiguracionSolar, calcular_dimensionamiento
from src.utils.helpers import (
    a_numero,
    configuracion_desde_formulario,
    validar_configuracion,
    formatear_numero,
)


class TestANumero:
    """Missing or invalid numeric input is treated as 0."""

    @pytest.mark.parametrize("valor", [None, "", "   ", "abc", [], float("nan"), "nan"])
    def test_invalid_values_become_zero(self, valor):
        assert a_numero(valor) == 0

    def test_numbers_pass_through(self):
        assert a_numero(5) == 5
        assert a_numero(2.5) == 2.5

    def test_numeric_strings(self):
        assert a_numero(" 12.5 ") == 12.5
        assert a_numero("1,25") == 1.25

    def test_custom_default(self):
        assert a_numero("x", defecto=7) == 7

    def test_infinity_is_kept(self):
        """Only missing or unparsable input is replaced."""
        assert math.isinf(a_numero("inf"))


class TestConfiguracionDesdeFormulario:

    def test_builds_configuration(self, raw_form_data):
        config = configuracion_desde_formulario(raw_form_data)
        assert config.modo == "consumo"
        assert config.consumo == 900.0
        assert config.potencia_deseada_kw == 0
        assert config.dias_autonomia == 0
        assert config.factor_inversor == pytest.approx(1.25)

    def test_same_result_as_typed_configuration(self, raw_form_data, home_config):
        config = configuracion_desde_formulario(raw_form_data)
        assert calcular_dimensionamiento(config) == calcular_dimensionamiento(home_config)

    def test_empty_form(self):
        """Missing numeric fields are 0, text fields keep their defaults."""
        config = configuracion_desde_formulario({})
        assert config.modo == "consumo"
        assert config.periodo == "mensual"
        assert config.region == "Andina"
        assert config.potencia_panel_w == 0
        r = calcular_dimensionamiento(config)
        assert r.numero_paneles == 0
        assert r.bateria_kwh == 0


class TestValidarConfiguracion:
    """Warnings never block or change the calculation."""

    def test_valid_configuration_has_no_warnings(self, home_config, power_config):
        assert validar_configuracion(home_config) == []
        assert validar_configuracion(power_config) == []

    def test_full_losses_warned(self, home_config):
        config = replace(home_config, perdidas_pct=100)
        advertencias = validar_configuracion(config)
        assert any("100%" in a for a in advertencias), advertencias
        # The configuration is still computed
        assert math.isinf(calcular_dimensionamiento(config).numero_paneles)

    def test_zero_dod_warned_only_with_autonomy(self, home_config):
        assert validar_configuracion(replace(home_config, dod_pct=0)) == []
        advertencias = validar_configuracion(replace(home_config, dod_pct=0, dias_autonomia=2))
        assert any("profundidad de descarga" in a for a in advertencias)

    def test_unknown_region_warned(self, home_config):
        advertencias = validar_configuracion(replace(home_config, region="Marte"))
        assert any("Marte" in a for a in advertencias)

    def test_low_inverter_factor_warned(self, home_config):
        advertencias = validar_configuracion(replace(home_config, factor_inversor=0.5))
        assert any("factor del inversor" in a for a in advertencias)

    def test_zero_panel_warned(self, home_config):
        advertencias = validar_configuracion(replace(home_config, potencia_panel_w=0))
        assert any("potencia del panel" in a for a in advertencias)

    def test_negative_consumption_uses_param_limits(self, home_config):
        advertencias = validar_configuracion(replace(home_config, consumo=-5))
        assert "consumo debe ser >= 0" in advertencias

    def test_power_mode_checks_desired_power(self):
        config = ConfiguracionSolar(modo="potencia", consumo=-1, potencia_deseada_kw=-1)
        advertencias = validar_configuracion(config)
        assert "potencia_deseada_kw debe ser >= 0" in advertencias
        assert "consumo debe ser >= 0" not in advertencias


class TestFormatearNumero:

    def test_two_decimals_by_default(self):
        assert formatear_numero(9.57) == "9.57"
        assert formatear_numero(30) == "30.00"

    def test_no_decimals(self):
        assert formatear_numero(7500, 0) == "7,500"

    def test_non_finite(self):
        assert formatear_numero(math.inf) == "Infinito"
        assert formatear_numero(-math.inf) == "-Infinito"
        assert formatear_numero(math.nan) == "N/D"

    def test_invalid(self):
        assert formatear_numero(None) == "N/D"
        assert formatear_numero("abc") == "N/D"
