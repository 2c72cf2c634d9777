"""
Configuración y constantes globales para la aplicación Calculadora Solar.
"""

HSP_POR_REGION = {
    # Horas sol pico promedio (h/día) por región natural de Colombia.
    # Valores fijos de estimación, no provienen de una consulta de radiación.
    "Andina": 5.0,
    "Caribe": 5.5,
    "Pacífica": 4.8,
    "Orinoquía": 5.2,
    "Amazonía": 4.5,
    "Bogotá (Altura)": 4.2
}

# Valor usado cuando la región no está en la tabla
HSP_DEFECTO = 5.0

DIAS_POR_MES = 30

# Eficiencia del inversor aplicada al dimensionamiento de baterías
EFICIENCIA_INVERSOR = 0.95

CATALOGO_PANELES_W = [300, 370, 450, 540]

MODO_CONSUMO = "consumo"
MODO_POTENCIA = "potencia"

MODOS_CALCULO = {
    MODO_CONSUMO: "Por consumo",
    MODO_POTENCIA: "Por potencia (kW)",
}

PERIODO_MENSUAL = "mensual"
PERIODO_DIARIO = "diario"

PERIODOS_CONSUMO = {
    PERIODO_MENSUAL: "kWh / mes",
    PERIODO_DIARIO: "kWh / día",
}

ETIQUETAS_GRAFICA = {
    "consumo": "Consumo (kWh/d)",
    "potencia_pico": "Potencia array (kW)",
    "inversor": "Inversor (kW)",
}

PRESETS = {
    "hogar": {
        "etiqueta": "Ejemplo: Hogar (900 kWh/mes)",
        "valores": {
            "modo": MODO_CONSUMO, "consumo": 900, "periodo": PERIODO_MENSUAL,
            "region": "Andina", "potencia_panel_w": 450, "perdidas_pct": 20,
            "dias_autonomia": 0,
        },
    },
    "industria": {
        "etiqueta": "Ejemplo: Pequeña industria (8000 kWh/mes)",
        "valores": {
            "modo": MODO_CONSUMO, "consumo": 8000, "periodo": PERIODO_MENSUAL,
            "region": "Caribe", "potencia_panel_w": 540, "perdidas_pct": 18,
            "dias_autonomia": 1,
        },
    },
}

NOMBRE_REPORTE_PDF = "reporte-calculadora-solar.pdf"

NOTA_ESTIMACION = (
    "Estos cálculos son estimaciones. Valida con un instalador para detalles "
    "de sombreado, orientación y normativa local."
)
