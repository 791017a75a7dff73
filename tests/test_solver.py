import io
import tempfile
import unittest
from collections import Counter
from contextlib import redirect_stderr, redirect_stdout
from multiprocessing import Value
from pathlib import Path
from unittest import mock

import hexsearch
from hexsearch.honeycomb import Honeycomb
from hexsearch.honeycomb_config import HoneycombConfig
from hexsearch.solver import worker
from hexsearch.solver.config import SolverConfig
from hexsearch.solver.config import config as solver_config
from hexsearch.solver.parallel import chunked
from hexsearch.solver.solver import find_words, run, solve_one
from hexsearch.solver.task_args import TaskArgs
from hexsearch.solver.utils import int_comma, is_traceable, prefilter, time_str

FLOWER = ["A", "BCDEFG"]
THREE_RINGS = ["A", "BCDEFG", "HIJKLMNOPQRS"]


class FindWordsTests(unittest.TestCase):
    def test_flower_dictionary(self) -> None:
        honeycomb = Honeycomb.build(FLOWER)
        self.assertEqual(find_words(honeycomb, ["AB", "AG", "BC", "XYZ"]), ["AB", "AG", "BC"])

    def test_center_only(self) -> None:
        honeycomb = Honeycomb.build(["A"])
        self.assertEqual(find_words(honeycomb, ["A", "AA"]), ["A"])

    def test_empty_dictionary(self) -> None:
        for rings in (["A"], THREE_RINGS):
            self.assertEqual(find_words(Honeycomb.build(rings), []), [])

    def test_sorted_without_repeats(self) -> None:
        honeycomb = Honeycomb.build(FLOWER)
        self.assertEqual(find_words(honeycomb, ["BC", "AB", "AB", "GF"]), ["AB", "BC", "GF"])

    def test_same_result_without_prefilter(self) -> None:
        honeycomb = Honeycomb.build(THREE_RINGS)
        words = ["SBH", "IBC", "ID", "AA", "HSRQ", "QQ", "ZZZ"]
        with_filter = find_words(honeycomb, words)
        with mock.patch.object(solver_config, "prefilter_words", False):
            self.assertEqual(find_words(honeycomb, words), with_filter)
        self.assertEqual(with_filter, ["HSRQ", "IBC", "SBH"])

    def test_logs_summary(self) -> None:
        logf = io.StringIO()
        find_words(Honeycomb.build(FLOWER), ["AB", "ZZ"], logf=logf)
        log = logf.getvalue()
        self.assertIn("Prefilter skipped 1 words", log)
        self.assertIn("Found 1 of 2 words", log)

    def test_parallel_matches_in_process(self) -> None:
        honeycomb = Honeycomb.build(THREE_RINGS)
        words = ["SBH", "IBC", "ID", "AB", "HSRQ", "QQ", "GABC", "BD", "A"]
        logf = io.StringIO()
        with mock.patch.object(solver_config, "chunk_size", 2):
            found = find_words(honeycomb, words, parallel=True, max_workers=1, logf=logf)
        self.assertEqual(found, find_words(honeycomb, words, parallel=False))
        self.assertIn("All chunks processed.", logf.getvalue())

    def test_rejects_bad_worker_count(self) -> None:
        honeycomb = Honeycomb.build(FLOWER)
        with self.assertRaises(ValueError):
            find_words(honeycomb, ["AB"], parallel=True, max_workers=0)


class RunTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.honeycomb_path = self.tmp / "flower.txt"
        self.honeycomb_path.write_text("2\nA\nBCDEFG\n", encoding="utf-8")
        self.dictionary_path = self.tmp / "dictionary.txt"
        self.dictionary_path.write_text("xyz\nbc\nag\nab\n", encoding="utf-8")
        patcher = mock.patch.object(solver_config, "log_dir", str(self.tmp / "logs"))
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_run_writes_log(self) -> None:
        with redirect_stderr(io.StringIO()):
            found = run(self.honeycomb_path, self.dictionary_path)
        self.assertEqual(found, ["AB", "AG", "BC"])
        log = (self.tmp / "logs" / "flower.log").read_text(encoding="utf-8")
        self.assertIn("Selected honeycomb: flower (2 rings, 7 cells)", log)
        self.assertIn("Found 3 of 4 words", log)

    def test_solve_one(self) -> None:
        logf = io.StringIO()
        config = HoneycombConfig(name="flower", rings=tuple(FLOWER))
        self.assertEqual(solve_one(config, ["GA", "GC"], logf=logf), ["GA"])
        self.assertIn("Dictionary words: 2", logf.getvalue())
        self.assertIn("  0 A\n  1 BCDEFG\n", logf.getvalue())

    def test_main_prints_words(self) -> None:
        out = io.StringIO()
        argv = ["hexsearch", str(self.honeycomb_path), str(self.dictionary_path)]
        with mock.patch.object(hexsearch, "argv", argv), redirect_stdout(out):
            with redirect_stderr(io.StringIO()):
                hexsearch.main()
        self.assertEqual(out.getvalue().splitlines(), ["AB", "AG", "BC"])

    def test_main_usage(self) -> None:
        with mock.patch.object(hexsearch, "argv", ["hexsearch"]), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                hexsearch.main()
        self.assertEqual(ctx.exception.code, 1)

    def test_main_reports_bad_input(self) -> None:
        self.honeycomb_path.write_text("2\nA\nBCDEF\n", encoding="utf-8")
        err = io.StringIO()
        argv = ["hexsearch", str(self.honeycomb_path), str(self.dictionary_path)]
        with mock.patch.object(hexsearch, "argv", argv), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                hexsearch.main()
        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("Ring 1 has 5 cells", err.getvalue())


class WorkerTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch.object(worker, "worker_state", None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_task_requires_initialization(self) -> None:
        with self.assertRaises(RuntimeError):
            worker.worker_task(["AB"])

    def test_initialized_worker_searches(self) -> None:
        ctr = Value("i", 3)
        with mock.patch.object(worker, "setproctitle") as title:
            worker.init_worker_globals(ctr, "flower", FLOWER)
        title.assert_called_once_with("hexsearch: worker 3 [flower]")
        self.assertEqual(ctr.value, 4)
        self.assertEqual(worker.worker_task(["BC", "BD", "AB"]), ["BC", "AB"])
        assert worker.worker_state is not None
        self.assertEqual(worker.worker_state.worker_idx, 3)
        self.assertEqual(worker.worker_state.honeycomb.rings(), FLOWER)


class TaskArgsTests(unittest.TestCase):
    def test_prefilters_words(self) -> None:
        config = HoneycombConfig(name="flower", rings=tuple(FLOWER))
        task_args = TaskArgs(
            config=config,
            words=["AB", "AA", "ABCDEFGB", "X"],
            letters=Counter("ABCDEFG"),
        )
        self.assertEqual(task_args.words, ["AB"])
        summary = task_args.summary()
        self.assertEqual(summary["words_total"], 4)
        self.assertEqual(summary["words_searched"], 1)
        self.assertEqual(summary["honeycomb"], "flower (2 rings, 7 cells)")


class UtilsTests(unittest.TestCase):
    def test_is_traceable(self) -> None:
        letters = Counter("ABCDEFG")
        self.assertTrue(is_traceable(Counter("CAB"), letters))
        self.assertFalse(is_traceable(Counter("ABA"), letters))
        self.assertFalse(is_traceable(Counter("Z"), letters))

    def test_prefilter_keeps_order(self) -> None:
        letters = Counter("AAB")
        self.assertEqual(prefilter(["BA", "", "AAA", "ABA", "C"], letters), ["BA", "ABA"])

    def test_chunked(self) -> None:
        self.assertEqual(chunked(["A", "B", "C"], 2), [["A", "B"], ["C"]])
        self.assertEqual(chunked([], 2), [])
        with self.assertRaises(ValueError):
            chunked(["A"], 0)

    def test_formatting(self) -> None:
        self.assertEqual(time_str(3723.5), "01:02:03.50")
        self.assertEqual(int_comma(1234567), "1,234,567")


class SolverConfigTests(unittest.TestCase):
    def test_environment_override(self) -> None:
        with mock.patch.dict("os.environ", {"CHUNK_SIZE": "17", "PREFILTER_WORDS": "false"}):
            settings = SolverConfig()
        self.assertEqual(settings.chunk_size, 17)
        self.assertFalse(settings.prefilter_words)

    def test_defaults(self) -> None:
        settings = SolverConfig(_env_file=None)
        self.assertIsNone(settings.max_workers)
        self.assertEqual(settings.log_dir, "logs")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
