"""Cuts two dictionary replicas off from each other for a while."""

from asimpy import Process
from typing import List
from dict_replica import DictReplica


class PartitionManager(Process):
    """Partitions the first two replicas at `start` and heals them after `duration`."""

    def init(
        self,
        replicas: List[DictReplica],
        start: float = 2.0,
        duration: float = 6.0,
    ):
        self.replicas = replicas
        self.start = start
        self.duration = duration

    async def run(self):
        left, right = self.replicas[0], self.replicas[1]

        await self.timeout(self.start)
        left.partition_from(right.replica_id)
        right.partition_from(left.replica_id)

        await self.timeout(self.duration)
        left.heal_partition(right.replica_id)
        right.heal_partition(left.replica_id)
