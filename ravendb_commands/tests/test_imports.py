import unittest


# noinspection PyUnresolvedReferences
class TestImports(unittest.TestCase):
    def test_imports_at_top_level(self):
        from ravendb_commands import BatchCommand
        from ravendb_commands import CommandData
        from ravendb_commands import CreateDatabaseCommand
        from ravendb_commands import DeleteByQueryCommand
        from ravendb_commands import DeleteDatabaseCommand
        from ravendb_commands import DeleteDocumentCommand
        from ravendb_commands import DeleteIndexCommand
        from ravendb_commands import DocumentConventions
        from ravendb_commands import ExceptionDispatcher
        from ravendb_commands import GetApiKeyCommand
        from ravendb_commands import GetClusterTopologyCommand
        from ravendb_commands import GetDocumentCommand
        from ravendb_commands import GetIndexCommand
        from ravendb_commands import GetIndexesCommand
        from ravendb_commands import GetOperationStateCommand
        from ravendb_commands import GetStatisticsCommand
        from ravendb_commands import GetTopologyCommand
        from ravendb_commands import PatchByQueryCommand
        from ravendb_commands import PatchCommand
        from ravendb_commands import PutApiKeyCommand
        from ravendb_commands import PutDocumentCommand
        from ravendb_commands import PutIndexesCommand
        from ravendb_commands import QueryCommand
        from ravendb_commands import RavenCommand
        from ravendb_commands import RequestExecutor
        from ravendb_commands import SaveChangesData
        from ravendb_commands import ServerNode


if __name__ == "__main__":
    unittest.main()
