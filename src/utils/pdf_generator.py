"""
Utilidad para generar el reporte PDF del dimensionamiento solar.
"""
import datetime
import io

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from src.config import MODOS_CALCULO, PERIODOS_CONSUMO, MODO_CONSUMO, NOTA_ESTIMACION
from src.utils.helpers import formatear_numero
from src.utils.plotting import crear_grafica_resultados, grafica_a_png


class ReportePDF(FPDF):
    BRAND_COLOR = (37, 99, 235)
    TEXT_COLOR = (0, 0, 0)
    NOTE_COLOR = (107, 114, 128)

    def __init__(self, fecha=None):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.fecha_reporte = fecha if fecha else datetime.date.today()
        self.font_family_base = "Helvetica"
        # El reporte siempre ocupa una sola página
        self.set_auto_page_break(False)
        self.set_margins(10, 10, 10)

    def header(self): pass
    def footer(self): pass

    def _linea(self, etiqueta, valor):
        self.set_font(self.font_family_base, '', 10)
        self.cell(110, 5.5, etiqueta)
        self.set_font(self.font_family_base, 'B', 10)
        self.cell(0, 5.5, valor, new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _titulo_seccion(self, texto):
        self.ln(3)
        self.set_text_color(*self.BRAND_COLOR)
        self.set_font(self.font_family_base, 'B', 12)
        self.cell(0, 8, texto, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*self.TEXT_COLOR)

    def crear_encabezado(self):
        self.set_text_color(*self.BRAND_COLOR)
        self.set_font(self.font_family_base, 'B', 18)
        self.cell(0, 10, "Calculadora Solar - Colombia", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*self.NOTE_COLOR)
        self.set_font(self.font_family_base, '', 9)
        self.multi_cell(0, 4.5, "Personalizada por región (horas pico de sol) y con modo por consumo o por potencia a instalar.",
                        align="L", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.cell(0, 5, f"Fecha: {self.fecha_reporte.strftime('%d/%m/%Y')}", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*self.TEXT_COLOR)

    def crear_datos_entrada(self, config, resultado):
        self._titulo_seccion("Datos de entrada")
        self._linea("Modo de cálculo", MODOS_CALCULO.get(config.modo, config.modo))
        if config.modo == MODO_CONSUMO:
            unidad = PERIODOS_CONSUMO.get(config.periodo, config.periodo)
            self._linea("Consumo", f"{formatear_numero(config.consumo)} {unidad}")
        else:
            self._linea("Potencia deseada a instalar", f"{formatear_numero(config.potencia_deseada_kw)} kW")
        self._linea("Región", f"{config.region} ({formatear_numero(resultado.horas_sol_pico, 1)} h/d)")
        self._linea("Potencia del panel", f"{formatear_numero(config.potencia_panel_w, 0)} W")
        self._linea("Pérdidas del sistema", f"{formatear_numero(config.perdidas_pct, 1)} %")
        self._linea("Factor inversor", formatear_numero(config.factor_inversor))
        self._linea("Autonomía", f"{formatear_numero(config.dias_autonomia, 1)} días")
        if resultado.incluye_bateria:
            self._linea("DOD batería", f"{formatear_numero(config.dod_pct, 1)} %")

    def crear_resultados(self, resultado):
        self._titulo_seccion("Resultados")
        for etiqueta, valor in resultado.como_diccionario().items():
            decimales = 0 if etiqueta.endswith("(W)") or etiqueta == "Número de paneles" else 2
            self._linea(etiqueta, formatear_numero(valor, decimales))

    def crear_grafica(self, resultado):
        self._titulo_seccion("Gráfica")
        png = grafica_a_png(crear_grafica_resultados(resultado.series_grafica()))
        self.image(io.BytesIO(png), x=10, w=190)

    def crear_nota(self):
        self.ln(2)
        self.set_text_color(*self.NOTE_COLOR)
        self.set_font(self.font_family_base, '', 8)
        self.multi_cell(0, 4, f"Nota: {NOTA_ESTIMACION}", align="L", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(*self.TEXT_COLOR)

    def generar(self, config, resultado):
        """Arma la página del reporte y retorna los bytes del PDF."""
        self.add_page()
        self.crear_encabezado()
        self.crear_datos_entrada(config, resultado)
        self.crear_resultados(resultado)
        self.crear_grafica(resultado)
        self.crear_nota()
        return bytes(self.output())


def generar_reporte_pdf(config, resultado, fecha=None):
    return ReportePDF(fecha=fecha).generar(config, resultado)
