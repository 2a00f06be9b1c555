from unittest import TestCase
from pathlib import Path
import logging
import tempfile

from prefixmatch import NO_MATCH, LexiconError, PrefixTrie, iter_entries, load_lexicon


class LexiconTestCase(TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.dir = Path(self._tmp.name)

    def write(self, name: str, text: str) -> Path:
        path = self.dir / name
        path.write_text(text, encoding="utf-8")
        return path


class TestIterEntries(TestCase):
    def test_skips_blank_and_comments(self):
        lines = ["# header\n", "\n", "a\t1\n", "ab\t2\r\n"]
        self.assertEqual(
            list(iter_entries(lines)),
            [(3, "a", "1"), (4, "ab", "2")],
        )

    def test_first_separator_only(self):
        self.assertEqual(list(iter_entries(["k\tv\tw"])), [(1, "k", "v\tw")])

    def test_word_without_value(self):
        self.assertEqual(list(iter_entries(["solo\n"])), [(1, "solo", "solo")])

    def test_empty_word(self):
        self.assertEqual(list(iter_entries(["\tfallback\n"])), [(1, "", "fallback")])

    def test_whitespace_kept(self):
        self.assertEqual(list(iter_entries([" a \tx "])), [(1, " a ", "x ")])

    def test_custom_separator(self):
        self.assertEqual(list(iter_entries(["a=1"], separator="=")), [(1, "a", "1")])


class TestLoadLexicon(LexiconTestCase):
    def test_load(self):
        path = self.write("words.tsv", "# test\na\t0\nab\t0\nabc\t1\nabcd\t2\nabcdefg\t-1\n")
        with self.assertLogs("prefixmatch", logging.INFO):
            trie = load_lexicon(path, value_type=int)

        self.assertEqual(len(trie), 5)
        self.assertEqual(trie.seek("abcde"), 2)
        self.assertEqual(trie.seek("abcdefg"), -1)
        self.assertIs(trie.seek("z"), NO_MATCH)

    def test_unicode(self):
        path = self.write("emoji.tsv", "😀\tone\n😀😁😂\tthree\n")
        trie = load_lexicon(path)
        self.assertEqual(trie.seek("😀😁😂😃"), "three")
        self.assertEqual(trie.seek("😀😁"), "one")

    def test_later_entries_win(self):
        path = self.write("dup.tsv", "key\told\nkey\tnew\n")
        trie = load_lexicon(path)
        self.assertEqual(trie["key"], "new")
        self.assertEqual(len(trie), 1)

    def test_layering_into_existing_trie(self):
        base = self.write("base.tsv", "a\tbase\nab\tbase\n")
        extra = self.write("extra.tsv", "ab\textra\n")
        trie = PrefixTrie()
        self.assertIs(load_lexicon(base, trie), trie)
        load_lexicon(extra, trie)
        self.assertEqual(trie.seek("a"), "base")
        self.assertEqual(trie.seek("abc"), "extra")

    def test_bad_value(self):
        path = self.write("bad.tsv", "a\t1\nb\ttwo\n")
        with self.assertRaises(LexiconError) as cm:
            load_lexicon(path, value_type=int)
        self.assertEqual(cm.exception.lineno, 2)
        self.assertEqual(cm.exception.path, str(path))
        self.assertIn(":2:", str(cm.exception))
        self.assertIsInstance(cm.exception, ValueError)

    def test_missing_file(self):
        with self.assertRaises(LexiconError) as cm:
            load_lexicon(self.dir / "nope.tsv")
        self.assertIsNone(cm.exception.lineno)
        self.assertIsInstance(cm.exception.__cause__, OSError)

    def test_wrong_encoding(self):
        path = self.dir / "latin.tsv"
        path.write_bytes("caf\xe9\t1\n".encode("latin-1"))
        with self.assertRaises(LexiconError):
            load_lexicon(path)
        trie = load_lexicon(path, encoding="latin-1")
        self.assertEqual(trie.seek("caf\u00e9 au lait"), "1")
