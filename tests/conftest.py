"""
Shared test fixtures and configuration for podfinder tests
"""

import pytest
from unittest.mock import Mock
from kubernetes.client import V1ObjectMeta, V1Pod, V1PodList, V1PodSpec, V1PodStatus
from podfinder.connections.base import BaseClientProvider


def build_pod(name, labels=None, phase="Running", namespace="default",
              node_name="node-1", pod_ip="10.0.0.1"):
    """Build a V1Pod as the API would return it"""
    return V1Pod(
        metadata=V1ObjectMeta(name=name, namespace=namespace, labels=labels),
        spec=V1PodSpec(containers=[], node_name=node_name),
        status=V1PodStatus(phase=phase, pod_ip=pod_ip)
    )


class StaticProvider(BaseClientProvider):
    """Provider returning a prepared handle, counting builds"""

    def __init__(self, handle=None, error=None):
        super().__init__()
        self.prepared_handle = handle
        self.prepared_error = error
        self.build_count = 0

    def _build_handle(self):
        self.build_count += 1
        if self.prepared_error is not None:
            raise self.prepared_error
        return self.prepared_handle


@pytest.fixture
def make_pod():
    """Factory for V1Pod records"""
    return build_pod


@pytest.fixture
def sample_pods():
    """The web/cache pod set used across filter tests"""
    return [
        build_pod("web-1", labels={"app": "web"}),
        build_pod("web-2", labels={}),
        build_pod("cache-1", labels={"app": "cache"}, phase="Pending"),
    ]


@pytest.fixture
def mock_core_v1(sample_pods):
    """Mock CoreV1Api returning sample_pods"""
    core_v1 = Mock()
    core_v1.list_namespaced_pod.return_value = V1PodList(items=sample_pods)
    return core_v1


@pytest.fixture
def mock_handle(mock_core_v1):
    """Handle exposing mock_core_v1"""
    handle = Mock()
    handle.core_v1 = mock_core_v1
    return handle


@pytest.fixture
def static_provider(mock_handle):
    """Provider serving mock_handle"""
    return StaticProvider(handle=mock_handle)


@pytest.fixture
def kubeconfig_file(tmp_path):
    """Minimal kubeconfig on disk"""
    path = tmp_path / "config"
    path.write_text(
        "apiVersion: v1\n"
        "kind: Config\n"
        "current-context: test-context\n"
        "clusters:\n"
        "- name: test-cluster\n"
        "  cluster:\n"
        "    server: https://k8s-api.example.com:6443\n"
        "    insecure-skip-tls-verify: true\n"
        "contexts:\n"
        "- name: test-context\n"
        "  context:\n"
        "    cluster: test-cluster\n"
        "    user: test-user\n"
        "    namespace: default\n"
        "- name: other-context\n"
        "  context:\n"
        "    cluster: test-cluster\n"
        "    user: test-user\n"
        "users:\n"
        "- name: test-user\n"
        "  user:\n"
        "    token: test-token\n"
    )
    return str(path)


@pytest.fixture
def provider_cls():
    """The StaticProvider class, for tests that need fresh instances"""
    return StaticProvider
