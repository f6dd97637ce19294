import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from main import load_grid_from_file, main, run, run_with_trace


class TestMainJsonInput(unittest.TestCase):
    def test_loads_valid_payload_with_algorithm(self) -> None:
        payload = {
            "grid": ["...", ".X.", "..."],
            "algorithm": "exhaustive",
        }
        file_path = self._write_json(payload)

        grid, algorithm, max_exhaustive_steps = load_grid_from_file(file_path)

        self.assertEqual(grid, payload["grid"])
        self.assertEqual(algorithm, "exhaustive")
        self.assertEqual(max_exhaustive_steps, 20)

    def test_loads_valid_payload_without_algorithm(self) -> None:
        file_path = self._write_json({"grid": [[0, 1], [0, 0]]})

        grid, algorithm, _ = load_grid_from_file(file_path)

        self.assertEqual(grid, [[0, 1], [0, 0]])
        self.assertEqual(algorithm, "dyn_prog")

    def test_raises_when_json_is_invalid(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            bad_path = Path(temp_dir) / "bad.json"
            bad_path.write_text("{ not valid json", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_grid_from_file(str(bad_path))

    def test_raises_when_file_is_missing(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError):
                load_grid_from_file(str(Path(temp_dir) / "missing.json"))

    def test_raises_when_grid_is_missing(self) -> None:
        file_path = self._write_json({"algorithm": "dyn_prog"})
        with self.assertRaises(ValueError):
            load_grid_from_file(file_path)

    def test_loaded_payload_can_be_counted(self) -> None:
        file_path = self._write_json({"grid": ["...", ".X.", "..."], "algorithm": "compare"})
        grid, algorithm, max_exhaustive_steps = load_grid_from_file(file_path)

        result = run(grid=grid, algorithm=algorithm, max_exhaustive_steps=max_exhaustive_steps)
        self.assertEqual(result["count"], 2)
        self.assertTrue(result["agree"])

    def test_run_rejects_non_integer_step_limit(self) -> None:
        with self.assertRaises(ValueError):
            run(grid=[".."], max_exhaustive_steps="10")  # type: ignore[arg-type]

    def test_run_with_trace_returns_trace_lines(self) -> None:
        result, trace_log = run_with_trace(grid=["..", ".."], algorithm="exhaustive")
        self.assertEqual(result["count"], 2)
        self.assertTrue(any("Accept" in line for line in trace_log))

    def test_cli_prints_json_result(self) -> None:
        file_path = self._write_json({"grid": ["...", "...", "..."]})
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main(["--input", file_path, "--algorithm", "compare", "--table"])

        output = json.loads(buffer.getvalue())
        self.assertEqual(output["result"]["count"], 6)
        self.assertEqual(output["result"]["table"][2], [1, 3, 6])
        self.assertNotIn("trace", output)

    def test_cli_exits_with_error_message_on_bad_grid(self) -> None:
        file_path = self._write_json({"grid": ["...", ".."]})
        with self.assertRaises(SystemExit) as context:
            main(["--input", file_path])
        self.assertIn("Error:", str(context.exception))

    def _write_json(self, payload: dict) -> str:
        tmp_file = tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False, encoding="utf-8")
        tmp_file.write(json.dumps(payload))
        tmp_file.flush()
        tmp_file.close()
        self.addCleanup(lambda: Path(tmp_file.name).unlink(missing_ok=True))
        return tmp_file.name


if __name__ == "__main__":
    unittest.main()
