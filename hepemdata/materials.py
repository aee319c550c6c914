"""Material data for all materials used in the current geometry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


def _number(value: Any, what: str) -> float | int:
    if not isinstance(value, (int, float)):
        raise TypeError(f"{what} must be a number, got {type(value).__name__}")
    return value


def _array(value: Any, what: str) -> list[Any]:
    """Read a JSON array that may be null (meaning empty)."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{what} must be an array or null, got {type(value).__name__}")
    return value


def _span(values: Sequence[Any]) -> list[Any] | None:
    """Write an array, using null for an empty one."""
    return list(values) if values else None


@dataclass
class MatData:
    """A single material: its elements, their atom densities and bulk properties."""

    g4_mat_index: int = -1
    element_vect: list[int] = field(default_factory=list)
    num_of_atoms_per_volume_vect: list[float] = field(default_factory=list)
    density: float = 0.0
    density_cor_factor: float = 0.0
    electron_density: float = 0.0
    radiation_length: float = 0.0

    def __post_init__(self) -> None:
        if len(self.element_vect) != len(self.num_of_atoms_per_volume_vect):
            raise ValueError(
                "element_vect and num_of_atoms_per_volume_vect differ in length: "
                f"{len(self.element_vect)} != {len(self.num_of_atoms_per_volume_vect)}"
            )

    @property
    def num_of_element(self) -> int:
        """Number of elements the material is composed of."""
        return len(self.element_vect)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this material."""
        return {
            "fG4MatIndex": self.g4_mat_index,
            "fElementVect": _span(self.element_vect),
            "fNumOfAtomsPerVolumeVect": _span(self.num_of_atoms_per_volume_vect),
            "fDensity": self.density,
            "fDensityCorfactor": self.density_cor_factor,
            "fElectronDensity": self.electron_density,
            "fRadiationLength": self.radiation_length,
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> MatData:
        """Build a material from a mapping; missing keys raise KeyError."""
        elements = [
            int(_number(v, "fElementVect item"))
            for v in _array(obj["fElementVect"], "fElementVect")
        ]
        atoms = [
            float(_number(v, "fNumOfAtomsPerVolumeVect item"))
            for v in _array(obj["fNumOfAtomsPerVolumeVect"], "fNumOfAtomsPerVolumeVect")
        ]
        return cls(
            g4_mat_index=int(_number(obj["fG4MatIndex"], "fG4MatIndex")),
            element_vect=elements,
            num_of_atoms_per_volume_vect=atoms,
            density=float(_number(obj["fDensity"], "fDensity")),
            density_cor_factor=float(_number(obj["fDensityCorfactor"], "fDensityCorfactor")),
            electron_density=float(_number(obj["fElectronDensity"], "fElectronDensity")),
            radiation_length=float(_number(obj["fRadiationLength"], "fRadiationLength")),
        )


@dataclass
class MaterialData:
    """All materials used in the geometry, with the Geant4-to-local index map.

    ``g4_mat_index_to_hepem_mat_index[i]`` is the index into ``material_data``
    of the Geant4 material with index ``i``, or -1 if it is not used.
    """

    g4_mat_index_to_hepem_mat_index: list[int] = field(default_factory=list)
    material_data: list[MatData] = field(default_factory=list)

    @property
    def num_g4_material(self) -> int:
        """Number of Geant4 materials, used or not."""
        return len(self.g4_mat_index_to_hepem_mat_index)

    @property
    def num_material_data(self) -> int:
        """Number of materials translated."""
        return len(self.material_data)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of all material data."""
        return {
            "fNumG4Material": self.num_g4_material,
            "fNumMaterialData": self.num_material_data,
            "fG4MatIndexToHepEmMatIndex": _span(self.g4_mat_index_to_hepem_mat_index),
            "fMaterialData": _span([m.to_dict() for m in self.material_data]),
        }

    @classmethod
    def from_dict(cls, obj: Mapping[str, Any]) -> MaterialData:
        """Build material data from a mapping.

        The stored counts fix the sizes; entries not given in the arrays keep
        their defaults. Arrays longer than the counts raise ValueError.
        """
        num_g4 = int(_number(obj["fNumG4Material"], "fNumG4Material"))
        num_used = int(_number(obj["fNumMaterialData"], "fNumMaterialData"))
        result = make_material_data(num_g4, num_used)

        indices = _array(obj["fG4MatIndexToHepEmMatIndex"], "fG4MatIndexToHepEmMatIndex")
        if len(indices) > num_g4:
            raise ValueError(
                f"fG4MatIndexToHepEmMatIndex has {len(indices)} entries, "
                f"more than fNumG4Material = {num_g4}"
            )
        for pos, value in enumerate(indices):
            result.g4_mat_index_to_hepem_mat_index[pos] = int(
                _number(value, "fG4MatIndexToHepEmMatIndex item")
            )

        materials = _array(obj["fMaterialData"], "fMaterialData")
        if len(materials) > num_used:
            raise ValueError(
                f"fMaterialData has {len(materials)} entries, "
                f"more than fNumMaterialData = {num_used}"
            )
        for pos, item in enumerate(materials):
            result.material_data[pos] = MatData.from_dict(item)
        return result


def make_material_data(num_g4_mat: int, num_used_g4_mat: int) -> MaterialData:
    """Create material data sized for the given numbers of materials.

    Every Geant4 material is marked unused (-1) and every material entry
    starts from its defaults.
    """
    if num_g4_mat < 0 or num_used_g4_mat < 0:
        raise ValueError("material counts must not be negative")
    return MaterialData(
        g4_mat_index_to_hepem_mat_index=[-1] * num_g4_mat,
        material_data=[MatData() for _ in range(num_used_g4_mat)],
    )