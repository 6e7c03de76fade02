"""Точка входа в приложение."""
from photofilter.app import ImageFilterApp
from photofilter.config import AppConfig
from photofilter.utils.logging import get_logger, setup_logging


def main() -> None:
    """Читает конфигурацию, настраивает логирование и запускает главное окно."""
    config = AppConfig.from_env()
    setup_logging(config.log_level)
    get_logger(__name__).info("Библиотека: %s, формат: %s", config.library_dir, config.export_format)
    app = ImageFilterApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
