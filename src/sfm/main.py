from __future__ import annotations

import logging

from sfm.application.container import build_container
from sfm.config import load_config
from sfm.logging_config import setup_logging
from sfm.ui.app import App

log = logging.getLogger(__name__)


def main() -> None:
    config = load_config()
    setup_logging(config.paths.logs_dir, level=logging.INFO)
    log.info("app_start api=%s timeout=%s", config.api_base_url, config.request_timeout)

    container = build_container(config)

    app = App(container)
    app.mainloop()


if __name__ == "__main__":
    main()
