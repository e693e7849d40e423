from klotski.engine.graphbuilder.graph import Graph, GraphBuilder, build_graph

__all__ = ["Graph", "GraphBuilder", "build_graph"]
