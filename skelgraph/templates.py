"""Binary matching of 3x3x3 voxel neighbourhoods against templates.

A neighbourhood is an integer whose low 27 bits are the occupancy of the
cube, numbered ``x + 3 * y + 9 * z``, so that bit 13 is the centre voxel.
"""

from __future__ import annotations

from dataclasses import dataclass

NEIGHBORHOOD_BITS = 27
_BIT_MASK = (1 << NEIGHBORHOOD_BITS) - 1

_SIX_CONN_MASK = 4281360
_EIGHTEEN_CONN_MASK = 49012410

# Templates from "Improved 3D Thinning Algorithms for Skeleton Extraction"
# (She et al., 2009): (attention mask, expected values).
_DELETION_TEMPLATES: tuple[tuple[int, int], ...] = (
    # Template A.
    (1904135, 65536),
    (4194815, 4194304),
    (19190345, 16384),
    (76699940, 4096),
    (117671360, 1024),
    (133955600, 16),
    # Template B.
    (2971147, 81920),
    (4248283, 4210688),
    (4263487, 4259840),
    (4348342, 4198400),
    (4425208, 4195328),
    (10050598, 69632),
    (16584208, 65552),
    (52548808, 17408),
    (57463312, 16400),
    (109270432, 5120),
    (114972688, 4112),
    (132350992, 1040),
    # Template C.
    (7165456, 81936),
    (4314328, 4211712),
    (4283446, 4263936),
    (4281883, 4276224),
    (4412848, 4199424),
    (14244880, 69648),
    (56742928, 17424),
    (113464336, 5136),
    # Template D.
    (253440, 512),
    (253440, 2048),
    (253440, 32768),
    (253440, 131072),
    (14700600, 8),
    (14700600, 32),
    (14700600, 2097152),
    (14700600, 8388608),
    (38339730, 2),
    (38339730, 128),
    (38339730, 524288),
    (38339730, 33554432),
)

_CONNECTIVITY_TEMPLATES: tuple[tuple[int, int], ...] = (
    # Template G, for end points.
    (4281360, 16),
    (4281360, 1024),
    (4281360, 4096),
    (4281360, 16384),
    (4281360, 65536),
    (4281360, 4194304),
    # Template H, for straight lines.
    (87226, 16),
    (4742674, 1024),
    (6395416, 4096),
    (12799024, 16384),
    (37998736, 65536),
    (48845824, 4194304),
)

_CORNER_TEMPLATES: tuple[tuple[int, int], ...] = (
    (20766719, 16384),
    (20815871, 65536),
    (24944639, 4194304),
    (77488127, 4096),
    (120050687, 16384),
    (127127039, 1024),
    (127130111, 4096),
    (124228607, 4194304),
    (134012495, 16384),
    (134106935, 16),
    (134111015, 4096),
    (134061647, 65536),
    (134190041, 16),
    (134191049, 1024),
    (134203892, 16),
    (134204900, 1024),
    (134207972, 4096),
    (134206409, 16384),
    (134172455, 65536),
    (131320319, 4194304),
)


@dataclass(frozen=True)
class VoxelTemplate:
    """An attention mask and the values expected under it (27 bits each)."""

    neighbor_mask: int
    neighbor_template: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "neighbor_mask", self.neighbor_mask & _BIT_MASK)
        object.__setattr__(
            self, "neighbor_template", self.neighbor_template & _BIT_MASK
        )

    def matches(self, voxel_neighbors: int) -> bool:
        """True if the neighbourhood equals the template wherever the mask is set."""
        return ((voxel_neighbors ^ self.neighbor_template) & self.neighbor_mask) == 0


class VoxelTemplateMatcher:
    """Matches 3x3x3 neighbourhoods against a list of templates."""

    def __init__(self) -> None:
        self._templates: list[VoxelTemplate] = []

    @property
    def templates(self) -> tuple[VoxelTemplate, ...]:
        return tuple(self._templates)

    def add_template(self, voxel_template: VoxelTemplate) -> None:
        self._templates.append(voxel_template)

    def add_integer_template(self, neighbor_mask: int, neighbor_template: int) -> None:
        self._templates.append(VoxelTemplate(neighbor_mask, neighbor_template))

    def fits_templates(self, voxel_neighbors: int) -> bool:
        """True if any template matches the neighbourhood."""
        neighbors = voxel_neighbors & _BIT_MASK
        return any(template.matches(neighbors) for template in self._templates)

    def _add_all(self, pairs: tuple[tuple[int, int], ...]) -> None:
        for mask, template in pairs:
            self.add_integer_template(mask, template)

    def set_deletion_templates(self) -> None:
        """Add the deletion templates of She et al."""
        self._add_all(_DELETION_TEMPLATES)

    def set_connectivity_templates(self) -> None:
        """Add the end-point and straight-line connectivity templates."""
        self._add_all(_CONNECTIVITY_TEMPLATES)

    def set_corner_templates(self) -> None:
        """Add the templates that detect corners."""
        self._add_all(_CORNER_TEMPLATES)

    def six_conn_neighbor_mask(self) -> int:
        return _SIX_CONN_MASK

    def eighteen_conn_neighbor_mask(self) -> int:
        return _EIGHTEEN_CONN_MASK