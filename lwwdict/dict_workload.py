"""Workload generator for dictionary operations."""

from asimpy import Process
from typing import List
from dict_replica import DictReplica


class DictWorkload(Process):
    """Run a script of set/remove operations against a replica.

    Operations are tuples: ("wait", delay), ("set", key, value) or
    ("remove", key).
    """

    def init(self, replica: DictReplica, operations: List[tuple]):
        self.replica = replica
        self.operations = operations

    async def run(self):
        for op_type, *args in self.operations:
            if op_type == "wait":
                await self.timeout(args[0])
            elif op_type == "set":
                self.replica.local_set(args[0], args[1])
            elif op_type == "remove":
                self.replica.local_remove(args[0])

            # Small delay between operations
            await self.timeout(0.1)
