import customtkinter as ctk

from photofilter.config import AppConfig
from photofilter.controllers.app_controller import AppController
from photofilter.services.export_service import ExportService
from photofilter.services.session_service import FilterSession
from photofilter.ui.bottom_bar import BottomBar
from photofilter.ui.image_viewer import ImageViewer
from photofilter.ui.sidebar import Sidebar


class ImageFilterApp(ctk.CTk):
    def __init__(self, config: AppConfig) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title(config.window_title)
        self.minsize(800, 560)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._export_service = ExportService(config.library_dir, image_format=config.export_format)
        self._session = FilterSession(export_service=self._export_service)

        self._controller = AppController(
            viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, session=self._session
        )
        self._controller.bind_events()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _on_close(self) -> None:
        # дождаться незавершённых записей в библиотеку
        self._export_service.shutdown(wait=True)
        self.destroy()
