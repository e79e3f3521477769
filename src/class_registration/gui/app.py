"""
Entry point for the Class Registration GUI.

This is the composition root: it builds the configuration, the form
controller, the gateway and the submit flow, then hands them to the
window.
"""
import logging
import sys
from typing import Optional

from class_registration.config import RegistrationConfig

logger = logging.getLogger(__name__)


def build_window(config: Optional[RegistrationConfig] = None):
    """
    Wire up the application objects and return the main window.

    Requires a QApplication to exist already.
    """
    from class_registration.core.form_state import RegistrationForm
    from class_registration.submission.gateway import RequestsTransport, SubmissionGateway
    from class_registration.submission.flow import SubmitFlow
    from class_registration.gui.main_window import RegistrationWindow

    config = config or RegistrationConfig.default()
    form = RegistrationForm(classes=config.classes, program_name=config.program_name)
    gateway = SubmissionGateway(RequestsTransport.from_config(config))
    flow = SubmitFlow(form, gateway)
    window = RegistrationWindow(form, flow)
    # Window owns the flow so both share a lifetime
    flow.setParent(window)
    return window


def run(config: Optional[RegistrationConfig] = None):
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from class_registration import __version__
    from class_registration.gui.styles.theme import GLOBAL_STYLESHEET
    from class_registration.gui.utils.logging_utils import configure_logging, install_exception_hooks

    configure_logging()
    install_exception_hooks()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Class Registration")
    app.setApplicationDisplayName("Class Registration")
    app.setApplicationVersion(__version__)
    app.setStyleSheet(GLOBAL_STYLESHEET)

    window = build_window(config)
    window.show()
    logger.info(f"Class Registration {__version__} started")

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
