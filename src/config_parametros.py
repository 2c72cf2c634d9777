"""
Configuración de parámetros ajustables para la Calculadora Solar.

Este módulo centraliza los valores por defecto del formulario y los rangos
recomendados para cada entrada. Los rangos solo se usan para advertir al
usuario: el motor de cálculo acepta cualquier valor numérico.

Para modificar los valores por defecto, cambia los valores en DEFAULT_PARAMS.
"""

# =============================================================================
# PARÁMETROS CONFIGURABLES POR DEFECTO
# =============================================================================

DEFAULT_PARAMS = {
    # --- Modo y consumo ---
    "modo": "consumo",
    "consumo": 300.0,  # kWh/mes
    "periodo": "mensual",
    "potencia_deseada_kw": 5.0,  # kW a instalar en modo potencia

    # --- Ubicación y paneles ---
    "region": "Andina",
    "potencia_panel_w": 450,  # W por panel

    # --- Pérdidas del sistema ---
    "perdidas_pct": 20.0,  # temperatura, cableado y sombras

    # --- Baterías ---
    "dias_autonomia": 0.0,  # 0 = sin baterías
    "dod_pct": 80.0,  # profundidad de descarga permitida

    # --- Inversor ---
    "factor_inversor": 1.25,  # sobredimensionamiento sobre la potencia pico
}

# =============================================================================
# LÍMITES Y VALIDACIONES
# =============================================================================

PARAM_LIMITS = {
    "consumo": {"min": 0, "max": 1_000_000, "step": 10.0},
    "potencia_deseada_kw": {"min": 0, "max": 10_000, "step": 0.1},
    "perdidas_pct": {"min": 0, "max": 50, "step": 1.0},
    "dias_autonomia": {"min": 0, "max": 30, "step": 1.0},
    "dod_pct": {"min": 10, "max": 100, "step": 5.0},
    "factor_inversor": {"min": 1, "max": 3, "step": 0.05},
}

# =============================================================================
# DESCRIPCIONES PARA UI
# =============================================================================

PARAM_DESCRIPTIONS = {
    "consumo": "Ej: 900 kWh/mes o 30 kWh/día.",
    "potencia_deseada_kw": "Ej: 10 kW para pequeña industria.",
    "region": "Horas pico de sol estimadas por región.",
    "perdidas_pct": "Incluye temperatura, cableado y sombras (18–22% recomendado).",
    "dod_pct": "Fracción de la batería que se puede descargar sin acortar su vida útil.",
    "factor_inversor": "Multiplicador aplicado a la potencia pico del arreglo para elegir el inversor.",
}

# =============================================================================
# FUNCIONES DE ACCESO
# =============================================================================

def get_param(name: str, valores_formulario: dict = None):
    """
    Valor de un campo del formulario.

    Usa el valor ingresado si el campo está en `valores_formulario`; si no,
    el valor por defecto. Un campo desconocido vale 0.
    """
    if valores_formulario and name in valores_formulario:
        return valores_formulario[name]
    return DEFAULT_PARAMS.get(name, 0)


def get_all_params(valores_formulario: dict = None) -> dict:
    """Formulario completo: valores por defecto sobrescritos por los ingresados."""
    return {**DEFAULT_PARAMS, **(valores_formulario or {})}


def validate_param(name: str, value: float) -> tuple:
    """
    Valida un parámetro contra sus límites.

    Args:
        name: Nombre del parámetro
        value: Valor a validar

    Returns:
        Tuple (is_valid, error_message)
    """
    if name not in PARAM_LIMITS:
        return True, ""

    limits = PARAM_LIMITS[name]
    if value < limits["min"]:
        return False, f"{name} debe ser >= {limits['min']}"
    if value > limits["max"]:
        return False, f"{name} debe ser <= {limits['max']}"

    return True, ""
