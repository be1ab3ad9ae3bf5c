import datetime
import enum
import json
import unittest

from ravendb_commands.documents.conventions import DocumentConventions
from ravendb_commands.exceptions.exceptions import DatabaseDoesNotExistException, ErrorResponseException
from ravendb_commands.http.raven_command import CommandState, HttpMethod, RavenCommand
from ravendb_commands.http.server_node import ServerNode
from ravendb_commands.tests.test_base import TestBase, make_response


class Color(enum.Enum):
    RED = "Red"


class EchoCommand(RavenCommand[dict]):
    def __init__(self, payload=None, conventions=None, **params):
        super().__init__(HttpMethod.POST if payload else HttpMethod.GET, conventions)
        self._echo_payload = payload
        self._echo_params = params

    def _build_request(self, node: ServerNode) -> None:
        self._end_point = f"/databases/{node.database}/echo"
        self._add_params(self._echo_params)
        self._payload = self._echo_payload


class TestRavenCommand(TestBase):
    def test_lifecycle(self):
        command = EchoCommand()
        self.assertEqual(CommandState.CONSTRUCTED, command.state)
        command.create_request(self.node)
        self.assertEqual(CommandState.REQUESTED, command.state)
        response = make_response(200, {"Value": 1})
        self.assertEqual({"Value": 1}, command.set_response(response))
        self.assertEqual(CommandState.COMPLETED, command.state)
        self.assertEqual({"Value": 1}, command.result)
        self.assertIs(response, command.server_response)

    def test_set_response_before_request(self):
        with self.assertRaises(RuntimeError):
            EchoCommand().set_response(make_response(200, {}))

    def test_create_request_twice(self):
        command = EchoCommand()
        command.create_request(self.node)
        with self.assertRaises(RuntimeError):
            command.create_request(self.node)

    def test_set_response_twice(self):
        command = EchoCommand()
        command.create_request(self.node)
        command.set_response(make_response(200, {}))
        with self.assertRaises(RuntimeError):
            command.set_response(make_response(200, {}))

    def test_invalid_node(self):
        command = EchoCommand()
        with self.assertRaises(TypeError):
            command.create_request("http://127.0.0.1:8080")
        with self.assertRaises(TypeError):
            command.create_request(None)
        self.assertEqual(CommandState.CONSTRUCTED, command.state)

    def test_failed_nodes(self):
        command = EchoCommand()
        self.assertFalse(command.was_failed())
        self.assertFalse(command.is_failed_with_node(self.node))

        error = ConnectionError("refused")
        command.add_failed_node(self.node, error)
        self.assertTrue(command.was_failed())
        self.assertTrue(command.is_failed_with_node(self.node))
        self.assertFalse(command.is_failed_with_node(self.other_node))
        self.assertIs(error, command.failed_nodes[self.node])

        # same url, different node
        self.assertFalse(command.is_failed_with_node(ServerNode(self.node.url, self.DATABASE)))

    def test_failed_nodes_invalid_node(self):
        command = EchoCommand()
        with self.assertRaises(TypeError):
            command.add_failed_node("A")
        with self.assertRaises(TypeError):
            command.is_failed_with_node(object())

    def test_params_encoding(self):
        command = EchoCommand(flag=True, off=False, missing=None, many=["a", "b"], wait=datetime.timedelta(minutes=1))
        request = command.create_request(self.node)
        self.assertEqual(
            f"{self.node.url}/databases/{self.DATABASE}/echo?flag=true&off=false&many=a&many=b&wait=00%3A01%3A00",
            request.url,
        )
        self.assertIn("missing", command.params)

    def test_params_are_copies(self):
        command = EchoCommand(flag=True)
        command.create_request(self.node)
        command.params["flag"] = False
        self.assertEqual(True, command.params["flag"])

    def test_payload_uses_json_default(self):
        command = EchoCommand({"Color": Color.RED, "At": datetime.datetime(2020, 1, 2, 3, 4, 5)})
        request = command.create_request(self.node)
        self.assertEqual("POST", request.method)
        self.assertEqual({"Color": "Red", "At": "2020-01-02T03:04:05.0000000"}, json.loads(request.data))

    def test_payload_uses_conventions(self):
        conventions = DocumentConventions()
        conventions.json_default_method = lambda o: "custom"
        request = EchoCommand({"Value": object()}, conventions).create_request(self.node)
        self.assertEqual({"Value": "custom"}, json.loads(request.data))

    def test_none_response(self):
        command = EchoCommand()
        command.create_request(self.node)
        with self.assertRaises(ErrorResponseException):
            command.set_response(None)

    def test_invalid_json(self):
        command = EchoCommand()
        command.create_request(self.node)
        with self.assertRaises(ErrorResponseException):
            command.set_response(make_response(200, "{not json"))

    def test_server_error_is_raised(self):
        body = {
            "Url": "/databases/Missing/echo",
            "Type": "Raven.Client.Exceptions.Database.DatabaseDoesNotExistException",
            "Message": "Database 'Missing' was not found",
            "Error": "Database 'Missing' was not found",
        }
        command = EchoCommand()
        command.create_request(self.node)
        with self.assertRaises(DatabaseDoesNotExistException):
            command.set_response(make_response(503, body))
        self.assertEqual(CommandState.COMPLETED, command.state)


class TestServerNode(unittest.TestCase):
    def test_trailing_slash(self):
        self.assertEqual("http://127.0.0.1:8080", ServerNode("http://127.0.0.1:8080/", "db").url)

    def test_identity(self):
        node = ServerNode("http://127.0.0.1:8080", "db")
        self.assertNotEqual(node, ServerNode("http://127.0.0.1:8080", "db"))
        self.assertEqual(1, len({node: 1, node: 2}))


if __name__ == "__main__":
    unittest.main()
