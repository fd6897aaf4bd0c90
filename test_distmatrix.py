import unittest


from costs import Op
from distmatrix import Candidate, DistanceMatrix, Position


class DistanceMatrixTestCase(unittest.TestCase):

    def test_construction(self):
        matrix = DistanceMatrix('ab', 'c')
        self.assertEqual(matrix.length, (3, 2))
        self.assertEqual(matrix.sequence, [[0, 0, 0], [0, 0, 0]])
        self.assertEqual(matrix.lookup, (('\0', 'a', 'b'), ('\0', 'c')))
        self.assertEqual(matrix.chars(2, 1), ('b', 'c'))
        self.assertEqual(matrix.chars(0, 0), ('\0', '\0'))
        empty = DistanceMatrix('', '')
        self.assertEqual(empty.length, (1, 1))
        self.assertEqual(empty.sequence, [[0]])
        self.assertEqual(empty.distance(), 0)

    def test_positions(self):
        cases = (
            # seq1 shorter: insert along y, delete along x
            ('a', 'abc', Position(2, 1), Position(1, 2), Position(1, 1)),
            # same length: insert along x, delete along y
            ('ab', 'cd', Position(1, 2), Position(2, 1), Position(1, 1)),
            # seq1 longer
            ('abc', 'a', Position(1, 2), Position(2, 1), Position(1, 1)),
        )
        for seq1, seq2, insert, delete, replace in cases:
            matrix = DistanceMatrix(seq1, seq2)
            self.assertEqual(matrix.insert_position(2, 2), insert)
            self.assertEqual(matrix.delete_position(2, 2), delete)
            self.assertEqual(matrix.replace_position(2, 2), replace)

    def test_value(self):
        matrix = DistanceMatrix('ab', 'c')
        matrix.sequence[1][2] = 7
        self.assertEqual(matrix.value(Position(2, 1)), 7)
        self.assertEqual(matrix.value(Position(-1, 1)), 0)
        self.assertEqual(matrix.value(Position(1, -1)), 0)
        self.assertEqual(matrix.distance(), 7)

    def test_candidates(self):
        matrix = DistanceMatrix('ab', 'cd')
        matrix.sequence[0][1] = 5
        self.assertEqual(matrix.onset(), Candidate(0, 0, 0, Op.ONSET))
        self.assertEqual(matrix.match(Position(1, 0)),
                Candidate(1, 0, 5, Op.MATCH))
        self.assertEqual(matrix.insert(Position(1, 0)),
                Candidate(1, 0, 5, Op.INSERT))
        self.assertEqual(matrix.replace(Position(0, -1)),
                Candidate(0, -1, 0, Op.REPLACE))
        self.assertEqual(matrix.delete(Position(-1, 0)),
                Candidate(-1, 0, 0, Op.DELETE))
        self.assertTrue(matrix.insert(Position(1, 0)).valid())
        self.assertFalse(matrix.replace(Position(0, -1)).valid())
        self.assertFalse(Position(-1, 0).valid())
