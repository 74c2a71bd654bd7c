import logging
import sys

from divelog.gui.app import DivelogApp

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig()
    app = DivelogApp()
    return app.run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
