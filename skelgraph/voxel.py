"""Skeleton voxels and their packing into 32-bit words."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, fields

WORDS_PER_VOXEL = 3
_UINT32 = 0xFFFFFFFF


@dataclass
class SkeletonVoxel:
    distance: float = 0.0
    num_basis_points: int = 0
    is_face: bool = False
    is_edge: bool = False
    is_vertex: bool = False
    vertex_id: int = -1


def _float_to_word(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _word_to_float(word: int) -> float:
    return struct.unpack("<f", struct.pack("<I", word & _UINT32))[0]


def serialize_voxels(voxels: Iterable[SkeletonVoxel]) -> list[int]:
    """Pack each voxel into three unsigned 32-bit words.

    The first word holds the float32 distance bits, the second the basis
    point count and the face/edge/vertex flags one byte each, the third the
    vertex id as a 32-bit integer (-1 unless the id is positive).
    """
    data: list[int] = []
    for voxel in voxels:
        flags = (
            (voxel.num_basis_points & 0xFF)
            | (int(voxel.is_face) << 8)
            | (int(voxel.is_edge) << 16)
            | (int(voxel.is_vertex) << 24)
        )
        vertex_id = voxel.vertex_id if voxel.vertex_id > 0 else -1
        data.extend((_float_to_word(voxel.distance), flags, vertex_id & _UINT32))
    return data


def deserialize_voxels(data: Sequence[int], num_voxels: int) -> list[SkeletonVoxel]:
    """Unpack voxels written by :func:`serialize_voxels`."""
    if len(data) != num_voxels * WORDS_PER_VOXEL:
        raise ValueError(
            f"expected {num_voxels * WORDS_PER_VOXEL} words, got {len(data)}"
        )
    voxels = []
    for distance_word, flags, id_word in zip(data[0::3], data[1::3], data[2::3]):
        id_word &= _UINT32
        vertex_id = id_word - (1 << 32) if id_word & 0x80000000 else id_word
        voxels.append(
            SkeletonVoxel(
                distance=_word_to_float(distance_word),
                num_basis_points=flags & 0xFF,
                is_face=bool(flags & 0x0000FF00),
                is_edge=bool(flags & 0x00FF0000),
                is_vertex=bool(flags & 0xFF000000),
                vertex_id=vertex_id,
            )
        )
    return voxels


def merge_voxel(voxel_a: SkeletonVoxel, voxel_b: SkeletonVoxel) -> SkeletonVoxel:
    """Merge voxel_a into voxel_b: voxel_b takes every value of voxel_a."""
    for item in fields(SkeletonVoxel):
        setattr(voxel_b, item.name, getattr(voxel_a, item.name))
    return voxel_b