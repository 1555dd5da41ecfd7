"""
User Gateway
HTTP gateway forwarding user requests to the data service
"""

__version__ = "1.0.0"
