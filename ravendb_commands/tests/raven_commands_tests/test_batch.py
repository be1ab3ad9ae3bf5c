import json
import unittest

from ravendb_commands.documents.commands.batches import (
    BatchCommand,
    CommandType,
    DeleteCommandData,
    PatchCommandData,
    PutCommandData,
    SaveChangesData,
)
from ravendb_commands.documents.operations.patch import PatchRequest
from ravendb_commands.exceptions.exceptions import InvalidOperationException
from ravendb_commands.http.raven_command import CommandState
from ravendb_commands.tests.test_base import TestBase, make_response


class TestCommandData(TestBase):
    def test_delete_keys(self):
        data = DeleteCommandData("products/2-A")
        self.assertEqual({"Type": "DELETE", "Id": "products/2-A", "ChangeVector": None}, data.to_json())
        self.assertEqual(CommandType.DELETE, data.command_type)

    def test_put_keys(self):
        data = PutCommandData("products/1-A", "A:1-abc", {"Name": "tests"})
        self.assertEqual({"Type", "Id", "ChangeVector", "Document"}, set(data.to_json().keys()))
        self.assertEqual("PUT", data.to_json()["Type"])

    def test_put_metadata_does_not_touch_document(self):
        document = {"Name": "tests"}
        data = PutCommandData("products/1-A", None, document, {"@collection": "Products"})
        self.assertEqual({"Name": "tests", "@metadata": {"@collection": "Products"}}, data.to_json()["Document"])
        self.assertEqual({"Name": "tests"}, document)

    def test_patch_keys(self):
        patch = PatchRequest.for_script("this.Name = 'testing';")
        data = PatchCommandData("products/1-A", None, patch)
        self.assertEqual({"Type", "Id", "ChangeVector", "Patch", "DebugMode"}, set(data.to_json().keys()))

        with_missing = PatchCommandData("products/1-A", None, patch, PatchRequest.for_script("this.Name = 'x';"))
        self.assertIn("PatchIfMissing", with_missing.to_json())

    def test_read_only(self):
        data = DeleteCommandData("products/2-A")
        with self.assertRaises(AttributeError):
            data.key = "products/3-A"

    def test_invalid_id(self):
        with self.assertRaises(InvalidOperationException):
            DeleteCommandData(None)
        with self.assertRaises(InvalidOperationException):
            PutCommandData("", None, {})
        with self.assertRaises(InvalidOperationException):
            PatchCommandData("products/1-A", None, None)


class TestBatch(TestBase):
    def setUp(self):
        super(TestBatch, self).setUp()
        self.put_command = PutCommandData(
            "products/1-A", None, {"Name": "tests", "@metadata": {"@collection": "Products"}}
        )
        self.delete_command = DeleteCommandData("products/2-A")
        self.patch_command = PatchCommandData(
            "products/1-A", None, PatchRequest.for_script("this.Name = 'testing';")
        )

    def test_request_keeps_order(self):
        command = BatchCommand([self.put_command, self.delete_command, self.patch_command])
        request = command.create_request(self.node)
        self.assertEqual("POST", request.method)
        self.assertEqual(f"/databases/{self.DATABASE}/bulk_docs", command.end_point)
        commands = json.loads(request.data)["Commands"]
        self.assertEqual(["PUT", "DELETE", "PATCH"], [c["Type"] for c in commands])
        self.assertEqual(["products/1-A", "products/2-A", "products/1-A"], [c["Id"] for c in commands])

    def test_invalid_element_rejects_whole_batch(self):
        command = BatchCommand([self.put_command, {"Type": "PUT"}])
        with self.assertRaises(InvalidOperationException):
            command.create_request(self.node)
        self.assertIsNone(command.payload)
        self.assertEqual(CommandState.CONSTRUCTED, command.state)

    def test_results(self):
        results = [{"Type": "PUT", "@id": "products/1-A"}, {"Type": "DELETE", "@id": "products/2-A"}]
        command = BatchCommand([self.put_command, self.delete_command])
        self.assertEqual(results, self.execute(command, make_response(201, {"Results": results})))

    def test_empty_body_raises(self):
        with self.assertRaises(InvalidOperationException):
            self.execute(BatchCommand([self.put_command]), make_response(201))


class TestSaveChangesData(TestBase):
    def test_accumulates_in_order(self):
        data = SaveChangesData()
        first = DeleteCommandData("products/1-A")
        second = DeleteCommandData("products/2-A")
        deferred = DeleteCommandData("products/3-A")
        data.add_command(first)
        data.add_command(second)
        data.add_deferred_command(deferred)
        data.add_document({"Name": "first"})

        self.assertEqual(3, data.commands_count)
        self.assertEqual(1, data.deferred_commands_count)
        self.assertEqual([first, second, deferred], data.commands)
        self.assertEqual({"Name": "first"}, data.get_document(0))

    def test_create_batch_command(self):
        data = SaveChangesData()
        data.add_command(DeleteCommandData("products/1-A"))
        data.add_command(PutCommandData("products/2-A", None, {"Name": "tests"}))

        batch = data.create_batch_command()
        self.assertIsInstance(batch, BatchCommand)
        self.assertEqual(2, data.commands_count)

        data.add_command(DeleteCommandData("products/3-A"))
        batch.create_request(self.node)
        self.assertEqual(["products/1-A", "products/2-A"], [c["Id"] for c in batch.payload["Commands"]])


if __name__ == "__main__":
    unittest.main()
