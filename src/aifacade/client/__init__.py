from aifacade.client.base import Connection
from aifacade.client.facade import AIClient
from aifacade.client.http_connection import HTTPConnection
from aifacade.client.mock_connection import MockConnection

__all__ = ["AIClient", "Connection", "HTTPConnection", "MockConnection"]
