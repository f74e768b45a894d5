"""Demonstration of LWW-Element-Dict behavior during a network partition."""

from asimpy import Environment
from dict_replica import DictReplica
from dict_workload import DictWorkload
from partition_manager import PartitionManager


def run_partition_simulation():
    """Two replicas diverge while partitioned and converge once healed."""
    env = Environment()

    replica1 = DictReplica(env, "R1", sync_interval=1.0)
    replica2 = DictReplica(env, "R2", sync_interval=1.0)

    replica1.add_peer(replica2)
    replica2.add_peer(replica1)

    PartitionManager(env, [replica1, replica2])

    DictWorkload(env, replica1, [
        ("set", "owner", "R1"),
        ("wait", 3.0),
        ("set", "status", "R1_value"),
        ("remove", "owner"),
    ])

    DictWorkload(env, replica2, [
        ("wait", 3.5),
        ("set", "status", "R2_value"),
        ("set", "owner", "R2"),
    ])

    env.run(until=15)

    print("\n=== Final State After Partition Heal ===")
    print(f"R1: {replica1.data.entries}")
    print(f"R2: {replica2.data.entries}")

    assert replica1.data.content_equals(replica2.data)
    assert replica1.syncs_dropped > 0 and replica2.syncs_dropped > 0

    print("Dictionaries converged despite partition!")


if __name__ == "__main__":
    run_partition_simulation()
