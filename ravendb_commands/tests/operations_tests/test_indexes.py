import json
import unittest

from ravendb_commands.documents.indexes.definitions import IndexDefinition, IndexPriority
from ravendb_commands.documents.operations.indexes import (
    DeleteIndexCommand,
    GetIndexCommand,
    GetIndexesCommand,
    PutIndexesCommand,
)
from ravendb_commands.exceptions.exceptions import (
    ErrorResponseException,
    IndexDoesNotExistException,
    InvalidOperationException,
)
from ravendb_commands.tests.test_base import TestBase, make_response


class TestIndexes(TestBase):
    def setUp(self):
        super(TestIndexes, self).setUp()
        self.index = IndexDefinition("Users/ByName", "from user in docs.Users select new { user.Name }")
        self.index.priority = IndexPriority.HIGH

    def test_put_indexes_request(self):
        command = PutIndexesCommand(self.index)
        request = command.create_request(self.node)
        self.assertEqual("PUT", request.method)
        self.assertEqual(f"/databases/{self.DATABASE}/indexes", command.end_point)
        indexes = json.loads(request.data)["Indexes"]
        self.assertEqual(1, len(indexes))
        self.assertEqual("Users/ByName", indexes[0]["Name"])
        self.assertEqual("High", indexes[0]["Priority"])
        self.assertEqual(["from user in docs.Users select new { user.Name }"], indexes[0]["Maps"])

    def test_put_indexes_result(self):
        body = {"Results": [{"Index": "Users/ByName", "RaftCommandIndex": 12}]}
        self.assertEqual(body["Results"], self.execute(PutIndexesCommand(self.index), make_response(201, body)))

    def test_put_indexes_empty_body(self):
        with self.assertRaises(ErrorResponseException):
            self.execute(PutIndexesCommand(self.index), make_response(201))

    def test_put_indexes_invalid(self):
        with self.assertRaises(InvalidOperationException):
            PutIndexesCommand()
        with self.assertRaises(InvalidOperationException):
            PutIndexesCommand(self.index, "not an index")
        with self.assertRaises(InvalidOperationException):
            PutIndexesCommand(IndexDefinition(maps="from doc in docs select new { doc.Name }"))

    def test_get_indexes(self):
        command = GetIndexesCommand(start=5, page_size=20)
        command.create_request(self.node)
        self.assertEqual({"start": 5, "page_size": 20}, command.params)
        self.assertEqual(f"/databases/{self.DATABASE}/indexes?start=5&page_size=20", command.path)

    def test_get_indexes_results(self):
        body = {"Results": [self.index.to_json()]}
        results = self.execute(GetIndexesCommand(), make_response(200, body))
        self.assertEqual("Users/ByName", IndexDefinition.from_json(results[0]).name)

    def test_get_indexes_not_found(self):
        with self.assertRaises(IndexDoesNotExistException):
            self.execute(GetIndexesCommand(), make_response(404))

    def test_get_indexes_array_body(self):
        body = [self.index.to_json()]
        self.assertEqual(body, self.execute(GetIndexesCommand(), make_response(200, body)))

    def test_get_indexes_empty_body(self):
        self.assertIsNone(self.execute(GetIndexesCommand(), make_response(200)))

    def test_get_index(self):
        command = GetIndexCommand("Users/ByName")
        command.create_request(self.node)
        self.assertEqual({"name": "Users/ByName"}, command.params)

        body = {"Results": [self.index.to_json()]}
        result = GetIndexCommand("Users/ByName")
        self.assertEqual("Users/ByName", self.execute(result, make_response(200, body))["Name"])

    def test_get_index_no_results(self):
        self.assertIsNone(self.execute(GetIndexCommand("Users/ByName"), make_response(200, {"Results": []})))

    def test_delete_index(self):
        command = DeleteIndexCommand("Users/ByName")
        request = command.create_request(self.node)
        self.assertEqual("DELETE", request.method)
        self.assertEqual({"name": "Users/ByName"}, command.params)
        self.assertIsNone(command.set_response(make_response(204)))

    def test_delete_index_invalid(self):
        with self.assertRaises(InvalidOperationException):
            DeleteIndexCommand("")
        with self.assertRaises(InvalidOperationException):
            DeleteIndexCommand(None)


if __name__ == "__main__":
    unittest.main()
