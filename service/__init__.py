"""
Service entry points for the network grader: the HTTP application
(``service.app``) and the command-line grader (``service.cli``).
"""

import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
