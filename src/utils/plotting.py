import io
import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from src.utils.helpers import formatear_numero


def crear_grafica_resultados(series):
    """
    Crea la gráfica de barras con los pares (etiqueta, valor) del resultado.
    Los valores infinitos o NaN se dibujan con altura 0 y su texto.
    """
    etiquetas = [etiqueta for etiqueta, _ in series]
    valores = [valor if math.isfinite(valor) else 0 for _, valor in series]

    fig, ax = plt.subplots(figsize=(8, 4))
    barras = ax.bar(etiquetas, valores, color='#2563EB', edgecolor='black', width=0.6)
    for barra, (_, valor) in zip(barras, series):
        ax.annotate(formatear_numero(valor),
                    xy=(barra.get_x() + barra.get_width() / 2, barra.get_height()),
                    xytext=(0, 3), textcoords="offset points",
                    ha='center', va='bottom', fontsize=9)

    ax.set_title("Resumen del Dimensionamiento", fontweight="bold")
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.margins(y=0.15)
    plt.tight_layout()
    return fig


def grafica_a_png(fig, dpi=100):
    """Serializa la figura en PNG y la cierra."""
    buffer = io.BytesIO()
    try:
        fig.savefig(buffer, format="png", dpi=dpi)
    finally:
        plt.close(fig)
    return buffer.getvalue()
