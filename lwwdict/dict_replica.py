"""Replica holding an LWW-Element-Dict and syncing it with peers."""

from asimpy import Process
from typing import Any, Dict, Set
from lww_element_dict import LWWElementDict


class DictReplica(Process):
    """A replica maintaining a dictionary and periodically sharing its state.

    Peers can be marked unreachable to simulate a network partition: syncs to
    them are counted in `syncs_dropped` instead of being delivered, and local
    edits keep piling up until the partition heals.
    """

    def init(self, replica_id: str, sync_interval: float = 2.0):
        self.replica_id = replica_id
        self.sync_interval = sync_interval

        # Simulated time is the timestamp source
        self.data = LWWElementDict(peer_id=replica_id, clock=lambda: self.now)

        self.peers: Dict[str, "DictReplica"] = {}
        self.unreachable: Set[str] = set()

        # Statistics
        self.updates_applied = 0
        self.syncs_sent = 0
        self.syncs_dropped = 0

    async def run(self):
        while True:
            await self.timeout(self.sync_interval)
            self.sync_with_peers()

    def add_peer(self, replica: "DictReplica"):
        """Register another replica to sync with (once per replica id)."""
        self.peers.setdefault(replica.replica_id, replica)

    def sync_with_peers(self):
        """Offer one snapshot of our dictionary to every reachable peer."""
        # merge() never mutates its argument, so peers can share the snapshot
        snapshot = self.data.clone()
        for peer_id, peer in self.peers.items():
            if peer_id in self.unreachable:
                self.syncs_dropped += 1
                continue
            self.syncs_sent += 1
            peer.receive_state(snapshot, self.replica_id)

    def receive_state(self, data: LWWElementDict, from_replica: str):
        """Merge a peer's dictionary and report which keys it changed."""
        before = self.data.entries
        self.data.merge(data)
        after = self.data.entries

        changed = sorted(
            (key for key in before.keys() | after.keys()
             if before.get(key, _MISSING) != after.get(key, _MISSING)),
            key=repr,
        )
        if changed:
            print(
                f"[{self.now:.1f}] {self.replica_id}: Merged state from {from_replica}, "
                f"changed {changed} -> {after}"
            )

    def partition_from(self, replica_id: str):
        """Stop delivering state to another replica."""
        self.unreachable.add(replica_id)
        print(f"[{self.now:.1f}] {self.replica_id}: Partitioned from {replica_id}")

    def heal_partition(self, replica_id: str):
        """Resume delivering state and show what this side holds."""
        self.unreachable.discard(replica_id)
        print(
            f"[{self.now:.1f}] {self.replica_id}: Healed partition with {replica_id}, "
            f"holding {self.data.entries} ({self.syncs_dropped} syncs dropped)"
        )

    def local_set(self, key: Any, value: Any):
        """Locally assign a value to a key."""
        self.data.set(key, value)
        self.updates_applied += 1
        print(f"[{self.now:.1f}] {self.replica_id}: Set {key!r} = {value!r}")

    def local_remove(self, key: Any):
        """Locally remove a key."""
        self.data.remove(key)
        self.updates_applied += 1
        print(
            f"[{self.now:.1f}] {self.replica_id}: Removed {key!r} "
            f"-> {self.data.entries}"
        )


_MISSING = object()
