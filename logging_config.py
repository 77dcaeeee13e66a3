# logging_config.py
import sys
import colorlog

LOG_FORMAT = "%(log_color)s%(levelname)-8s%(reset)s %(name)s: %(message)s"

def configure_logging(level="INFO", stream=None):
    # force: vervangt bestaande root-handlers (app en cli roepen dit elk aan)
    colorlog.basicConfig(
        format=LOG_FORMAT,
        level=level,
        stream=stream or sys.stdout,
        force=True,
    )
