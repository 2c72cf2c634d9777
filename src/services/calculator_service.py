"""
Servicio de cálculos técnicos para el dimensionamiento de sistemas solares.

El cálculo es una función pura de la configuración: no guarda estado, no
valida rangos y nunca lanza excepciones por valores fuera de dominio. Las
divisiones por cero producen infinito o NaN, igual que la aritmética IEEE.
"""
import math
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Dict, List, Tuple, Union

from src.config import (
    HSP_POR_REGION,
    HSP_DEFECTO,
    DIAS_POR_MES,
    EFICIENCIA_INVERSOR,
    MODO_CONSUMO,
    PERIODO_MENSUAL,
    ETIQUETAS_GRAFICA,
    PRESETS,
)
from src.config_parametros import DEFAULT_PARAMS

Numero = Union[int, float]


@dataclass(frozen=True)
class ConfiguracionSolar:
    modo: str = DEFAULT_PARAMS["modo"]
    consumo: float = DEFAULT_PARAMS["consumo"]
    periodo: str = DEFAULT_PARAMS["periodo"]
    potencia_deseada_kw: float = DEFAULT_PARAMS["potencia_deseada_kw"]
    region: str = DEFAULT_PARAMS["region"]
    potencia_panel_w: float = DEFAULT_PARAMS["potencia_panel_w"]
    perdidas_pct: float = DEFAULT_PARAMS["perdidas_pct"]
    dias_autonomia: float = DEFAULT_PARAMS["dias_autonomia"]
    dod_pct: float = DEFAULT_PARAMS["dod_pct"]
    factor_inversor: float = DEFAULT_PARAMS["factor_inversor"]


@dataclass(frozen=True)
class ResultadoDimensionamiento:
    consumo_diario_kwh: float
    wh_por_dia: float
    potencia_arreglo_w: Numero
    numero_paneles: Numero
    potencia_pico_kw: float
    inversor_sugerido_kw: float
    bateria_kwh: float
    horas_sol_pico: float
    eficiencia_sistema: float
    incluye_bateria: bool = False

    def series_grafica(self) -> List[Tuple[str, float]]:
        """Pares (etiqueta, valor) para la gráfica de barras."""
        return [
            (ETIQUETAS_GRAFICA["consumo"], self.consumo_diario_kwh),
            (ETIQUETAS_GRAFICA["potencia_pico"], self.potencia_pico_kw),
            (ETIQUETAS_GRAFICA["inversor"], self.inversor_sugerido_kw),
        ]

    def como_diccionario(self) -> Dict[str, Numero]:
        """Resultados en el orden en que se muestran al usuario."""
        datos = {
            "Consumo/Generación diaria estimada (kWh/día)": self.consumo_diario_kwh,
            "Potencia del arreglo necesaria (W)": self.potencia_arreglo_w,
            "Número de paneles": self.numero_paneles,
            "Potencia pico del arreglo (kW)": self.potencia_pico_kw,
            "Inversor recomendado (kW)": self.inversor_sugerido_kw,
        }
        if self.incluye_bateria:
            datos["Batería estimada, capacidad útil (kWh)"] = self.bateria_kwh
        return datos


def _dividir(a, b):
    """División con semántica IEEE: x/0 da ±inf y 0/0 da NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _techo(valor):
    if not math.isfinite(valor):
        return valor
    return math.ceil(valor)


def _redondear_2(valor):
    """Redondeo al centésimo más cercano, mitades hacia arriba."""
    escalado = valor * 100
    if not math.isfinite(escalado):
        return escalado / 100
    base = math.floor(escalado)
    if escalado - base >= 0.5:
        base += 1
    return base / 100


def _techo_2(valor):
    """Redondeo hacia arriba al siguiente centésimo."""
    return _techo(valor * 100) / 100


def horas_sol_pico(region: str) -> float:
    """Horas sol pico de la región, 5.0 si la región no existe."""
    return HSP_POR_REGION.get(region, HSP_DEFECTO)


def calcular_energia_diaria(config: ConfiguracionSolar, horas: float) -> float:
    """
    Energía diaria en kWh, sin redondear.

    En modo potencia se asume que la potencia deseada se sostiene durante
    las horas sol pico de la región.
    """
    if config.modo == MODO_CONSUMO:
        if config.periodo == PERIODO_MENSUAL:
            return config.consumo / DIAS_POR_MES
        return config.consumo
    return config.potencia_deseada_kw * horas


def calcular_bateria_kwh(energia_diaria_kwh, dias_autonomia, dod_pct):
    """
    Capacidad útil de batería para cubrir los días de autonomía.

    Retorna 0 cuando no hay días de autonomía.
    """
    if not dias_autonomia > 0:
        return 0
    fraccion_util = (dod_pct / 100) * EFICIENCIA_INVERSOR
    return _techo_2(_dividir(energia_diaria_kwh * dias_autonomia, fraccion_util))


def calcular_dimensionamiento(config: ConfiguracionSolar) -> ResultadoDimensionamiento:
    """
    Calcula paneles, potencia pico, inversor y batería para una configuración.

    Los pasos intermedios se calculan con precisión completa; solo los
    campos de salida se redondean. Los equipos (inversor, batería) se
    redondean hacia arriba para no quedar subdimensionados.
    """
    horas = horas_sol_pico(config.region)
    energia_diaria = calcular_energia_diaria(config, horas)

    wh_por_dia = energia_diaria * 1000
    eficiencia_sistema = 1 - config.perdidas_pct / 100

    potencia_arreglo_w = 0
    if horas > 0:
        potencia_arreglo_w = _techo(_dividir(wh_por_dia, horas * eficiencia_sistema))

    numero_paneles = 0
    if config.potencia_panel_w > 0:
        numero_paneles = _techo(potencia_arreglo_w / config.potencia_panel_w)

    potencia_pico_kw = _redondear_2((numero_paneles * config.potencia_panel_w) / 1000)
    inversor_sugerido_kw = _techo_2(potencia_pico_kw * config.factor_inversor)

    bateria_kwh = calcular_bateria_kwh(energia_diaria, config.dias_autonomia, config.dod_pct)

    return ResultadoDimensionamiento(
        consumo_diario_kwh=_redondear_2(energia_diaria),
        wh_por_dia=wh_por_dia,
        potencia_arreglo_w=potencia_arreglo_w,
        numero_paneles=numero_paneles,
        potencia_pico_kw=potencia_pico_kw,
        inversor_sugerido_kw=inversor_sugerido_kw,
        bateria_kwh=bateria_kwh,
        horas_sol_pico=horas,
        eficiencia_sistema=eficiencia_sistema,
        incluye_bateria=config.dias_autonomia > 0,
    )


# ConfiguracionSolar es inmutable y hashable: sirve directamente como llave
calcular_dimensionamiento_cacheado = lru_cache(maxsize=128)(calcular_dimensionamiento)


def aplicar_preset(nombre: str, base: ConfiguracionSolar = None) -> ConfiguracionSolar:
    """
    Construye la configuración de un ejemplo predefinido.

    Los campos que el ejemplo no define se toman de `base` (por defecto,
    la configuración inicial).
    """
    valores = PRESETS[nombre]["valores"]
    return replace(base or ConfiguracionSolar(), **valores)
