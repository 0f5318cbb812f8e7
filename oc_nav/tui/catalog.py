"""Static menu tree for the navigator."""
from __future__ import annotations

from dataclasses import dataclass

ROOT_TITLE = "Navigation"

CUSTOM_COMMANDS = "Custom Commands"
COMMAND_HISTORY = "Command History"


@dataclass(frozen=True)
class MenuNode:
    """One entry in the menu tree.

    A node with children is a group and is never run directly, whatever
    ``is_exec`` says. A leaf either runs ``command`` or is routed to a
    named interactive action.
    """

    name: str
    description: str = ""
    command: str | None = None
    children: tuple[MenuNode, ...] = ()
    is_exec: bool = False

    @property
    def is_group(self) -> bool:
        return bool(self.children)

    @property
    def is_executable(self) -> bool:
        return not self.is_group and self.is_exec and bool(self.command)


def _group(name: str, description: str, *children: MenuNode) -> MenuNode:
    return MenuNode(name=name, description=description, children=tuple(children))


def _run(name: str, command: str, description: str) -> MenuNode:
    return MenuNode(name=name, description=description, command=command, is_exec=True)


def _action(name: str, description: str) -> MenuNode:
    return MenuNode(name=name, description=description)


def build_catalog(binary: str = "oc") -> tuple[MenuNode, ...]:
    """Build the root level of the menu tree.

    Args:
        binary: Program name used as the first word of every command

    Returns:
        Top-level nodes in display order
    """
    oc = binary
    return (
        _group(
            "Projects & Namespaces",
            "Manage OpenShift projects and namespaces",
            _run("List all projects", f"{oc} get projects", "Show all available projects"),
            _run("Current project info", f"{oc} project", "Display current project information"),
            _action("Switch project", "Interactive project switching"),
            _action("Create new project", "Create a new OpenShift project"),
            _action("Delete project", "Delete an existing project"),
        ),
        _group(
            "Workloads",
            "Manage application workloads",
            _run("Pods", f"{oc} get pods", "List all pods in current namespace"),
            _run("Deployments", f"{oc} get deployments", "List all deployments"),
            _run("DeploymentConfigs", f"{oc} get dc", "List all deployment configs"),
            _run("ReplicaSets", f"{oc} get rs", "List all replica sets"),
            _run("StatefulSets", f"{oc} get sts", "List all stateful sets"),
            _run("DaemonSets", f"{oc} get ds", "List all daemon sets"),
            _run("Jobs", f"{oc} get jobs", "List all jobs"),
            _run("CronJobs", f"{oc} get cronjobs", "List all cron jobs"),
        ),
        _group(
            "Services & Routes",
            "Manage networking and access",
            _run("Services", f"{oc} get svc", "List all services"),
            _run("Routes", f"{oc} get routes", "List all routes"),
            _run("Ingress", f"{oc} get ingress", "List all ingress resources"),
            _run("Endpoints", f"{oc} get endpoints", "List all endpoints"),
            _run("NetworkPolicies", f"{oc} get networkpolicies", "List network policies"),
        ),
        _group(
            "Storage",
            "Manage persistent storage",
            _run("Persistent Volumes", f"{oc} get pv", "List all persistent volumes"),
            _run("Persistent Volume Claims", f"{oc} get pvc", "List all PVCs"),
            _run("Storage Classes", f"{oc} get sc", "List all storage classes"),
            _run("Volume Snapshots", f"{oc} get volumesnapshots", "List volume snapshots"),
        ),
        _group(
            "Configuration",
            "Manage configuration resources",
            _run("ConfigMaps", f"{oc} get configmaps", "List all config maps"),
            _run("Secrets", f"{oc} get secrets", "List all secrets"),
            _run("Service Accounts", f"{oc} get sa", "List all service accounts"),
            _run("Role Bindings", f"{oc} get rolebindings", "List role bindings"),
            _run("Cluster Role Bindings", f"{oc} get clusterrolebindings", "List cluster role bindings"),
        ),
        _group(
            "Monitoring & Logs",
            "Monitor applications and view logs",
            _run(
                "Events",
                f"{oc} get events --sort-by=.metadata.creationTimestamp",
                "Show recent events",
            ),
            _run("Node status", f"{oc} get nodes", "Check node status"),
            _run("Resource usage", f"{oc} top nodes", "Show resource usage by nodes"),
            _action("Pod logs", "View pod logs"),
            _action("Follow logs", "Follow pod logs in real-time"),
        ),
        _group(
            "Build & Deploy",
            "Manage builds and deployments",
            _run("Build Configs", f"{oc} get bc", "List all build configs"),
            _run("Builds", f"{oc} get builds", "List all builds"),
            _run("Image Streams", f"{oc} get is", "List all image streams"),
            _run("Image Stream Tags", f"{oc} get istag", "List image stream tags"),
            _run("Templates", f"{oc} get templates", "List all templates"),
        ),
        _group(
            "Cluster Administration",
            "Cluster-level operations",
            _run("Cluster version", f"{oc} get clusterversion", "Show cluster version"),
            _run("Cluster operators", f"{oc} get co", "List cluster operators"),
            _run("Machine Config Pools", f"{oc} get mcp", "List machine config pools"),
            _run("Nodes", f"{oc} get nodes -o wide", "List all nodes with details"),
            _run("Namespaces", f"{oc} get namespaces", "List all namespaces"),
        ),
        _action(CUSTOM_COMMANDS, f"Execute custom {oc} commands"),
        _action(COMMAND_HISTORY, "View previously executed commands"),
    )


def walk(nodes: tuple[MenuNode, ...]):
    """Yield every node in the tree, depth first."""
    for node in nodes:
        yield node
        yield from walk(node.children)
