"""Basic LWW-Element-Dict convergence demonstration."""

from asimpy import Environment
from dict_replica import DictReplica
from dict_workload import DictWorkload


def run_basic_simulation():
    """Three replicas edit the same keys concurrently and converge."""
    env = Environment()

    replica1 = DictReplica(env, "R1", sync_interval=3.0)
    replica2 = DictReplica(env, "R2", sync_interval=3.0)
    replica3 = DictReplica(env, "R3", sync_interval=3.0)

    # Connect replicas in a mesh
    replicas = [replica1, replica2, replica3]
    for replica in replicas:
        for peer in replicas:
            if peer is not replica:
                replica.add_peer(peer)

    DictWorkload(env, replica1, [
        ("set", "name", "Alice"),
        ("set", "fruit", "apple"),
        ("set", "veg", "carrot"),
    ])

    # Same timestamps as R1: the higher replica id wins each tie
    DictWorkload(env, replica2, [
        ("set", "name", "Bob"),
        ("remove", "fruit"),
    ])

    DictWorkload(env, replica3, [
        ("wait", 1.0),
        ("set", "fruit", "banana"),
        ("remove", "veg"),
    ])

    env.run(until=15)

    print("\n=== Final States ===")
    for replica in replicas:
        print(f"{replica.replica_id}: {replica.data.entries}")

    assert replica1.data.content_equals(replica2.data)
    assert replica2.data.content_equals(replica3.data)
    assert replica1.data != replica2.data  # different peer ids

    print("All replicas converged!")


if __name__ == "__main__":
    run_basic_simulation()
