import torch
from moore_neighborhood import enumerate_neighbor_coord_offsets
import pytest


class TestGridNNS:
    device = torch.device("cpu")

    def _inverse_block(self, dim, radius):
        idx2offset, fn_offset2idx = enumerate_neighbor_coord_offsets(
            dim, radius, self.device
        )
        idx = fn_offset2idx(idx2offset)
        assert torch.equal(idx, torch.arange(len(idx2offset)))

    def test_inverse(self):
        self._inverse_block(1, 1)
        self._inverse_block(2, 1)
        self._inverse_block(2, 3)
        self._inverse_block(3, 1)
        self._inverse_block(3, 2)

    def test_invalid_offsets(self):
        _, fn_offset2idx = enumerate_neighbor_coord_offsets(3, 1, self.device)
        offsets = torch.tensor([[0, 0, 0], [2, 0, 0], [0, -2, 1], [1, 0, 0]])
        assert fn_offset2idx(offsets).tolist() == [-1, -1, -1, 13]

    def test_int32_offsets(self):
        idx2offset, fn_offset2idx = enumerate_neighbor_coord_offsets(2, 1, self.device)
        idx = fn_offset2idx(idx2offset.int())
        assert idx.dtype == torch.long
        assert idx.tolist() == list(range(8))

    def test_shape_mismatch(self):
        _, fn_offset2idx = enumerate_neighbor_coord_offsets(2, 1, self.device)
        with pytest.raises(AssertionError):
            fn_offset2idx(torch.zeros((4, 3), dtype=torch.long))

    def test_empty(self):
        with pytest.warns(UserWarning, match="empty neighborhood"):
            idx2offset, fn_offset2idx = enumerate_neighbor_coord_offsets(
                2, 0, self.device
            )
        assert idx2offset.shape == (0, 2)
        assert fn_offset2idx(torch.zeros((3, 2), dtype=torch.long)).tolist() == [
            -1,
            -1,
            -1,
        ]
