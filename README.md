# skelgraph

Building blocks for working with the skeleton (generalized Voronoi diagram)
of free space in a voxel map, and with the sparse topological graph built on
top of it. The package uses only the standard library.

## What is in it

- **`skelgraph.templates`**: `VoxelTemplate` and `VoxelTemplateMatcher`.
  A 3×3×3 neighbourhood is a 27-bit integer, and bit 13 is the centre voxel.
  The matcher checks a neighbourhood against masked templates with
  `fits_templates`. It has built-in sets of templates:
  `set_deletion_templates` for 3D thinning, `set_corner_templates` and
  `set_connectivity_templates`. `six_conn_neighbor_mask` and
  `eighteen_conn_neighbor_mask` return the masks of the 6- and 18-connected
  neighbours.
- **`skelgraph.topology`**: connectivity tests used when thinning.
  - `is_simple_point` tells whether removing the centre voxel would leave
    its neighbours in more than one 26-connected piece.
  - `is_end_point` tells whether the centre voxel ends a line.
  - `is_removable_edge_point` combines these with the deletion templates.
  - `neighbor_index_to_bit` maps a neighbour's index to its bit in the cube.
    Neighbour indices list the face neighbours first, then the edge
    neighbours, then the corners.
- **`skelgraph.diagram`**: rules applied to each voxel.
  - `basis_directions` keeps the neighbour wavefront directions that diverge
    from the voxel's own parent direction.
  - `classify_basis_points` decides from a basis point count whether a voxel
    is a face, an edge or a vertex. `is_edge_by_neighbor_count` and
    `is_vertex_by_neighbor_count` decide the same from neighbour counts.
  - `vertices_to_prune` finds vertices that lie within a radius of a vertex
    that is further from obstacles.
- **`skelgraph.graph`**: the `SkeletonPoint` and `Skeleton` point sets, and
  `SparseSkeletonGraph` with its `SkeletonVertex` and `SkeletonEdge`
  records.
  - Adding an edge links it to both of its vertices.
  - Removing a vertex removes the edges attached to it.
  - `are_vertices_directly_connected` tells whether an edge joins two
    vertices.
- **`skelgraph.graph_ops`**:
  - `max_distance_from_line` gives the largest distance of a path from a
    straight line, and the index of the point where it occurs.
  - `label_subgraph` and `label_all_subgraphs` label connected components.
    `label_all_subgraphs` drops vertices that have no connections.
  - `merge_subgraphs` joins two subgraph ids in a mapping and keeps the
    lower id.
- **`skelgraph.sparse_planner`**: `SparseGraphPlanner`.
  - Call `setup` before searching.
  - `closest_vertices` looks up the vertices nearest to a point.
  - `path_between_vertices` runs A* over the graph.
  - `path` plans between the vertices nearest to two positions. It returns
    `None` when they are not connected.
- **`skelgraph.voxel_astar`**: `VoxelAStar` runs A* over 26-connected voxel
  offsets from an origin voxel. The caller passes an `is_valid` rule and an
  optional `is_target` rule. `max_iterations` can limit the search.
  `voxel_path_to_coordinates` turns the offsets into positions.
- **`skelgraph.graph_io`**: `save_graph` writes a graph to a JSON file and
  `load_graph` reads it back. A file that cannot be read as a graph raises
  `GraphFormatError`. The functions `vertex_to_record`, `edge_to_record`,
  `record_to_vertex` and `record_to_edge` convert single records.
- **`skelgraph.voxel`**: `SkeletonVoxel`.
  - `serialize_voxels` packs voxels into three 32-bit words each.
    `deserialize_voxels` unpacks them.
  - `merge_voxel` copies one voxel's values into another.

## What it does not do

The package does not build distance fields. It does not store voxel layers
or blocks. It does not run a complete pipeline that generates a skeleton
from a map. It works on points, neighbourhood bitmasks, graphs and
caller-supplied validity rules. It has no command-line program and no
visualization.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Example

```python
from skelgraph.graph import SkeletonEdge, SkeletonVertex, SparseSkeletonGraph
from skelgraph.graph_io import load_graph, save_graph
from skelgraph.sparse_planner import SparseGraphPlanner

graph = SparseSkeletonGraph()
a = graph.add_vertex(SkeletonVertex(point=(0.0, 0.0, 0.0)))
b = graph.add_vertex(SkeletonVertex(point=(1.0, 0.0, 0.0)))
c = graph.add_vertex(SkeletonVertex(point=(1.0, 1.0, 0.0)))
graph.add_edge(SkeletonEdge(start_vertex=a, end_vertex=b))
graph.add_edge(SkeletonEdge(start_vertex=b, end_vertex=c))

planner = SparseGraphPlanner(graph)
planner.setup()
print(planner.path((0.1, 0.0, 0.0), (1.0, 0.9, 0.0)))
# [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)]

save_graph("graph.json", graph)
restored = load_graph("graph.json")
print(restored.vertex_ids(), restored.edge_ids())
# [0, 1, 2] [0, 1]
```

## Running the tests

```
pytest
```