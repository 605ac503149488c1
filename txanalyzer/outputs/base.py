# txanalyzer/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def write(self, report):
        """Render a report built by txanalyzer.report.build_report."""
        pass
