import cluster_readiness
from cluster_readiness.exceptions import ClusterReadinessError, ContainerNotFoundError


def test_init_getattr_exposes_classes():
    """Provides lazy attribute access for public classes."""
    assert cluster_readiness.ReadinessWaiter.__name__ == "ReadinessWaiter"
    assert cluster_readiness.ReadinessTimeout.__name__ == "ReadinessTimeout"
    assert cluster_readiness.Success().succeeded()
    assert cluster_readiness.Failure("x").failure_message() == "x"


def test_exceptions_share_a_base_class():
    assert issubclass(cluster_readiness.ReadinessTimeout, ClusterReadinessError)
    err = ContainerNotFoundError("db")
    assert isinstance(err, LookupError)
    assert err.container_name == "db"
    assert str(err) == "Container 'db' not found."
