"""
Interfaz para escritorio (Desktop).
"""
import dataclasses

import streamlit as st
import pandas as pd

from src.config import (
    HSP_POR_REGION,
    CATALOGO_PANELES_W,
    MODOS_CALCULO,
    PERIODOS_CONSUMO,
    MODO_CONSUMO,
    PRESETS,
    NOMBRE_REPORTE_PDF,
    NOTA_ESTIMACION,
)
from src.config_parametros import DEFAULT_PARAMS, PARAM_LIMITS, PARAM_DESCRIPTIONS, get_all_params
from src.services.calculator_service import aplicar_preset, calcular_dimensionamiento_cacheado
from src.utils.helpers import (
    CAMPOS_NUMERICOS,
    configuracion_desde_formulario,
    validar_configuracion,
    formatear_numero,
)
from src.utils.plotting import crear_grafica_resultados, grafica_a_png
from src.utils.pdf_generator import generar_reporte_pdf


def clave_widget(campo):
    return f"input_{campo}"


def inicializar_estado():
    """
    Carga los valores del formulario en session_state la primera vez.

    Los valores se guardan con el nombre del campo y cada widget usa su
    propia llave (`input_<campo>`). Streamlit borra el estado de los widgets
    que no se dibujan en una ejecución (por ejemplo el consumo en modo
    potencia); las llaves del campo no son de widget y sobreviven.
    """
    for campo, valor in get_all_params().items():
        if campo not in st.session_state:
            st.session_state[campo] = valor


def _guardar_valor(campo):
    st.session_state[campo] = st.session_state[clave_widget(campo)]


def _llaves_widget(campo):
    clave = clave_widget(campo)
    if clave not in st.session_state:
        st.session_state[clave] = st.session_state[campo]
    return {"key": clave, "on_change": _guardar_valor, "args": (campo,)}


def cargar_preset(nombre):
    """Callback de los botones de ejemplo: reemplaza toda la configuración."""
    config = aplicar_preset(nombre)
    for campo, valor in dataclasses.asdict(config).items():
        if campo in CAMPOS_NUMERICOS and campo != "potencia_panel_w":
            valor = float(valor)
        st.session_state[campo] = valor
        st.session_state[clave_widget(campo)] = valor


def _number_input(etiqueta, campo, **kwargs):
    limites = PARAM_LIMITS[campo]
    return st.number_input(
        etiqueta,
        min_value=float(limites["min"]),
        max_value=float(limites["max"]),
        step=float(limites["step"]),
        help=PARAM_DESCRIPTIONS.get(campo),
        **_llaves_widget(campo),
        **kwargs
    )


def render_formulario_consumo():
    st.radio(
        "Modo de cálculo", options=list(MODOS_CALCULO), format_func=MODOS_CALCULO.get,
        horizontal=True, **_llaves_widget("modo")
    )

    if st.session_state.modo == MODO_CONSUMO:
        col_valor, col_periodo = st.columns([2, 1])
        with col_valor:
            _number_input("Consumo", "consumo")
        with col_periodo:
            st.selectbox("Unidad", options=list(PERIODOS_CONSUMO), format_func=PERIODOS_CONSUMO.get,
                         **_llaves_widget("periodo"))
    else:
        _number_input("Potencia deseada a instalar (kW)", "potencia_deseada_kw")

    st.selectbox(
        "Región (Colombia)", options=list(HSP_POR_REGION),
        format_func=lambda r: f"{r} - {HSP_POR_REGION[r]} h/d",
        help=PARAM_DESCRIPTIONS["region"], **_llaves_widget("region")
    )
    st.selectbox(
        "Potencia del panel (W)", options=CATALOGO_PANELES_W,
        format_func=lambda w: f"{w} W", **_llaves_widget("potencia_panel_w")
    )
    _number_input("Pérdidas del sistema (%)", "perdidas_pct")


def render_formulario_equipos():
    _number_input("Autonomía (días) - baterías", "dias_autonomia")
    _number_input("DOD (%) batería", "dod_pct")
    _number_input("Factor inversor", "factor_inversor")


def render_resultados(config, resultado):
    st.subheader("📊 Resultados")
    lineas = [
        f"Consumo/Generación diaria estimada: **{formatear_numero(resultado.consumo_diario_kwh)} kWh/día**",
        f"Potencia del arreglo necesaria: **{formatear_numero(resultado.potencia_arreglo_w, 0)} W**",
        f"Número de paneles (~{formatear_numero(config.potencia_panel_w, 0)} W): **{formatear_numero(resultado.numero_paneles, 0)}**",
        f"Potencia pico del arreglo: **{formatear_numero(resultado.potencia_pico_kw)} kW**",
        f"Inversor recomendado: **{formatear_numero(resultado.inversor_sugerido_kw)} kW**",
    ]
    if resultado.incluye_bateria:
        lineas.append(f"Batería estimada (capacidad útil): **{formatear_numero(resultado.bateria_kwh)} kWh**")
    st.markdown("\n".join(f"- {linea}" for linea in lineas))

    with st.expander("Ver tabla de resultados", expanded=False):
        tabla = pd.DataFrame(
            [(etiqueta, formatear_numero(valor)) for etiqueta, valor in resultado.como_diccionario().items()],
            columns=["Resultado", "Valor"]
        )
        st.dataframe(tabla, hide_index=True, use_container_width=True)

    try:
        fig = crear_grafica_resultados(resultado.series_grafica())
        st.image(grafica_a_png(fig))
    except Exception as e:
        st.error(f"Error generando la gráfica: {e}")


def render_acciones(config, resultado):
    col_hogar, col_industria, col_pdf = st.columns(3)
    with col_hogar:
        st.button(PRESETS["hogar"]["etiqueta"], on_click=cargar_preset, args=("hogar",),
                  type="primary", use_container_width=True)
    with col_industria:
        st.button(PRESETS["industria"]["etiqueta"], on_click=cargar_preset, args=("industria",),
                  use_container_width=True)
    with col_pdf:
        try:
            pdf_bytes = generar_reporte_pdf(config, resultado)
        except Exception as e:
            st.error(f"Error generando el reporte PDF: {e}")
        else:
            st.download_button(
                label="📥 Descargar reporte PDF",
                data=pdf_bytes, file_name=NOMBRE_REPORTE_PDF,
                mime="application/pdf", use_container_width=True
            )


def render_desktop_interface():
    """Interfaz principal de la calculadora"""
    st.title("☀️ Calculadora Solar - Colombia")
    st.caption("Personalizada por región (horas pico de sol) y con modo por consumo o por potencia a instalar.")

    inicializar_estado()

    col_izq, col_der = st.columns(2)
    with col_izq:
        render_formulario_consumo()
    with col_der:
        render_formulario_equipos()

    datos = get_all_params({campo: st.session_state[campo] for campo in DEFAULT_PARAMS if campo in st.session_state})
    config = configuracion_desde_formulario(datos)

    for advertencia in validar_configuracion(config):
        st.warning(f"⚠️ {advertencia}")

    resultado = calcular_dimensionamiento_cacheado(config)

    render_resultados(config, resultado)
    render_acciones(config, resultado)

    st.info(f"**Nota:** {NOTA_ESTIMACION}")
