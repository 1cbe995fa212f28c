from cubespell.model.network import CubeNetwork, NodeRole, build_network

__all__ = ["CubeNetwork", "NodeRole", "build_network"]
