import streamlit as st

from src.ui.desktop import render_desktop_interface


def main():
    # Configuración básica
    st.set_page_config(
        page_title="Calculadora Solar",
        page_icon="☀️",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    render_desktop_interface()


if __name__ == '__main__':
    main()
