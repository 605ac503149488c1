# txanalyzer/outputs/json_output.py

import os
import json
import logging
from txanalyzer.outputs.base import BaseOutput

logger = logging.getLogger(__name__)


class JSONOutput(BaseOutput):
    """
    Writes the report to <output_dir>/report.json, replacing any earlier one.
    """
    def __init__(self, config):
        self.config      = config
        self.output_dir  = config.get('output_dir', 'data')
        os.makedirs(self.output_dir, exist_ok=True)

    def write(self, report):
        out_path = os.path.join(self.output_dir, 'report.json')
        with open(out_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)
        logger.info("Written report to %s", out_path)
        return out_path
