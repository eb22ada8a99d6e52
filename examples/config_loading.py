"""config_loading.py"""
import sys

from clparams.config import loader
from clparams.utils import setup_logging

setup_logging(log_filename=None)

parameters = loader("clparams.yaml")

if __name__ == "__main__":
    parameters.parse(sys.argv[1:])
    if not parameters.run_action():
        parameters.render_help()
