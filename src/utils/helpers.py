"""
Funciones de utilidad y validación para la aplicación.
"""
import math

from src.config import HSP_POR_REGION, MODO_CONSUMO
from src.config_parametros import get_param, validate_param
from src.services.calculator_service import ConfiguracionSolar

CAMPOS_NUMERICOS = [
    "consumo", "potencia_deseada_kw", "potencia_panel_w", "perdidas_pct",
    "dias_autonomia", "dod_pct", "factor_inversor",
]
CAMPOS_TEXTO = ["modo", "periodo", "region"]


def a_numero(valor, defecto=0.0):
    """Convierte una entrada del formulario a número; lo inválido vale `defecto`."""
    if isinstance(valor, bool):
        return float(valor)
    if isinstance(valor, (int, float)):
        return defecto if isinstance(valor, float) and math.isnan(valor) else valor
    if isinstance(valor, str):
        valor = valor.replace(',', '.').strip()
    try:
        numero = float(valor)
    except (ValueError, TypeError):
        return defecto
    if math.isnan(numero):
        return defecto
    return numero


def configuracion_desde_formulario(datos):
    """
    Arma una ConfiguracionSolar a partir de los valores crudos del formulario.

    Los campos numéricos ausentes o inválidos quedan en 0; los campos de
    texto ausentes conservan su valor por defecto.
    """
    valores = {}
    for campo in CAMPOS_NUMERICOS:
        valores[campo] = a_numero(datos.get(campo))
    for campo in CAMPOS_TEXTO:
        valores[campo] = datos.get(campo) or get_param(campo)
    return ConfiguracionSolar(**valores)


def validar_configuracion(config):
    """
    Revisa que la configuración sea coherente y retorna una lista de advertencias.

    No modifica ni rechaza la configuración: el cálculo se hace igual.
    """
    advertencias = []

    if config.perdidas_pct >= 100:
        advertencias.append("Las pérdidas del sistema deben ser menores a 100%; el arreglo resultaría infinito")

    if config.dias_autonomia > 0 and config.dod_pct <= 0:
        advertencias.append("La profundidad de descarga debe ser mayor a 0% para dimensionar baterías")

    if config.potencia_panel_w <= 0:
        advertencias.append("La potencia del panel debe ser mayor a 0")

    if config.factor_inversor < 1:
        advertencias.append("El factor del inversor debe ser mayor o igual a 1")

    if config.region not in HSP_POR_REGION:
        advertencias.append(f"Región desconocida '{config.region}'; se usan 5.0 horas sol pico")

    if config.modo == MODO_CONSUMO:
        campos = ["consumo"]
    else:
        campos = ["potencia_deseada_kw"]
    campos += ["perdidas_pct", "dias_autonomia", "factor_inversor"]
    if config.dias_autonomia > 0:
        campos.append("dod_pct")

    for campo in campos:
        es_valido, mensaje = validate_param(campo, getattr(config, campo))
        if not es_valido and mensaje not in advertencias:
            advertencias.append(mensaje)

    return advertencias


def formatear_numero(valor, decimales=2):
    """Formatea un número para mostrarlo; infinito y NaN se muestran como texto."""
    try:
        valor = float(valor)
    except (ValueError, TypeError):
        return "N/D"
    if math.isnan(valor):
        return "N/D"
    if math.isinf(valor):
        return "Infinito" if valor > 0 else "-Infinito"
    if decimales == 0:
        return f"{valor:,.0f}"
    return f"{valor:,.{decimales}f}"
