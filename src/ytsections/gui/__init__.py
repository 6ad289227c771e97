"""PyQt6 front end for picking a section and copying its download command."""

from .controller import ViewState, YtSectionsController
from .main_window import YtSectionsGUI, run_gui

__all__ = ["ViewState", "YtSectionsController", "YtSectionsGUI", "run_gui"]
