from .logging_utils import setup_logging, print_analysis_result

__all__ = ['setup_logging', 'print_analysis_result']
