"""
Dependency graph between contracts and deployment order planning
"""
import logging
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional, Set, Tuple

from contract_deployer.exceptions import CycleError
from contract_deployer.utils.dependencies import extract_dependencies

if TYPE_CHECKING:
    from contract_deployer.contract import ContractArtifact

LOGGER = logging.getLogger("ContractDeployer")


class DependencyGraph:
    """Directed acyclic graph over contract names

    An edge A -> B means that A can not be deployed before B has an address.
    Nodes and edges keep their insertion order.
    """

    def __init__(self) -> None:
        """Initialize an empty graph"""
        self._successors: Dict[str, List[str]] = {}

    @property
    def nodes(self) -> List[str]:
        """Return the nodes, in insertion order

        Returns:
            List[str]: contract names
        """
        return list(self._successors)

    @property
    def edges(self) -> List[Tuple[str, str]]:
        """Return the edges, in insertion order

        Returns:
            List[Tuple[str, str]]: (dependent, dependency)
        """
        return [(node, succ) for node, succs in self._successors.items() for succ in succs]

    def has_node(self, node: str) -> bool:
        """Check if the contract is in the graph

        Args:
            node (str): contract name

        Returns:
            bool: True if the node exists
        """
        return node in self._successors

    def has_edge(self, source: str, target: str) -> bool:
        return target in self._successors.get(source, [])

    def successors(self, node: str) -> List[str]:
        """Return the direct dependencies of a node

        Args:
            node (str): contract name

        Returns:
            List[str]: dependency names, in insertion order
        """
        return list(self._successors[node])

    def add_node(self, node: str) -> None:
        """Add a node without edge. Adding an existing node does nothing

        Args:
            node (str): contract name
        """
        if not self.has_node(node):
            self._successors[node] = []

    def add_edge(self, source: str, target: str) -> None:
        """Add the edge source -> target

        The edge is rejected, and the graph left unchanged, if it would create a cycle.

        Args:
            source (str): dependent contract
            target (str): dependency

        Raises:
            CycleError: if target already depends on source, or source == target
        """
        self.add_node(source)
        self.add_node(target)
        if self.has_edge(source, target):
            return
        if source == target or self.reaches(target, source):
            raise CycleError(source, target)
        self._successors[source].append(target)

    def reaches(self, start: str, goal: str) -> bool:
        """Check if goal can be reached from start

        Args:
            start (str): first node
            goal (str): searched node

        Returns:
            bool: True if there is a path start -> ... -> goal
        """
        seen: Set[str] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node == goal:
                return True
            if node in seen:
                continue
            seen.add(node)
            if self.has_node(node):
                stack.extend(self.successors(node))
        return False

    def is_acyclic(self) -> bool:
        """Check that the graph has no cycle

        Returns:
            bool: True if the graph is a DAG
        """
        try:
            self.postorder()
        except CycleError:
            return False
        return True

    def postorder(self, roots: Optional[Iterable[str]] = None) -> List[str]:
        """Depth first post-order traversal

        Roots are visited in the given order (graph order by default), successors
        in insertion order. A node is emitted once all its successors were emitted.

        Args:
            roots (Optional[Iterable[str]]): nodes to start from. Defaults to None (all nodes).

        Raises:
            CycleError: if a cycle is met during the traversal

        Returns:
            List[str]: nodes in post-order
        """
        if roots is None:
            roots = self.nodes

        order: List[str] = []
        done: Set[str] = set()
        in_progress: Set[str] = set()

        for root in roots:
            if root in done:
                continue
            in_progress.add(root)
            stack: List[Tuple[str, Iterator[str]]] = [(root, iter(self.successors(root)))]
            while stack:
                node, children = stack[-1]
                child = next(children, None)
                if child is None:
                    stack.pop()
                    in_progress.discard(node)
                    done.add(node)
                    order.append(node)
                elif child in in_progress:
                    raise CycleError(node, child)
                elif child not in done:
                    in_progress.add(child)
                    stack.append((child, iter(self.successors(child))))
        return order

    def __len__(self) -> int:
        return len(self._successors)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, str) and self.has_node(node)


def build_dependency_graph(
    artifacts: Iterable["ContractArtifact"], placeholder_names: Optional[Dict[str, str]] = None
) -> DependencyGraph:
    """Build the dependency graph of the artifacts

    Artifacts are processed in the given order. The first edge introducing a
    cycle stops the construction.

    Args:
        artifacts (Iterable[ContractArtifact]): contract artifacts, in a deterministic order
        placeholder_names (Optional[Dict[str, str]]): hashed placeholder -> contract name.
            Defaults to None.

    Raises:
        CycleError: if a dependency introduces a cycle

    Returns:
        DependencyGraph: dependency graph
    """
    graph = DependencyGraph()
    for artifact in artifacts:
        graph.add_node(artifact.name)
        for dependency in extract_dependencies(artifact, placeholder_names):
            graph.add_edge(artifact.name, dependency)
    return graph


def plan_order(graph: DependencyGraph) -> List[str]:
    """Return the deployment order: every dependency comes before its dependents

    Args:
        graph (DependencyGraph): dependency graph

    Returns:
        List[str]: contract names, the first one is deployed first
    """
    order = graph.postorder()
    LOGGER.debug("Deployment order: %s", order)
    return order
