# yamlreadme

`yamlreadme` walks a directory and finds every `.yaml` and `.yml` file in it. It asks a local
Ollama model to describe each file in one or two short sentences. It then writes the
descriptions to `yaml_details.md` in that directory, grouped by sub-directory and sorted by
file name.

## Requirements

- A running Ollama server. The client reads `OLLAMA_HOST` and uses `http://127.0.0.1:11434` when
  it is not set.
- The `llama3.2:latest` model pulled into that server. The command stops with an error when the
  server does not list this model. The model name is fixed and cannot be changed by an option.

## Installation

```
pip install .
```

## Usage

```
summarize-yaml path/to/repository
```

Options:

- `--regenerate`: write a new summary for every file, even one that already has a summary in the
  existing `yaml_details.md`.
- `--localcache`: also write each new summary to `.yaml_summary_cache/` in the current working
  directory, one `<relative_path_with_underscores>.md` file per YAML file. This is mostly useful
  for debugging.

A later run reads the existing `yaml_details.md` and keeps the summaries already in it. Only files
that have no summary yet are sent to the model. A progress bar is shown while files are processed.
If a file cannot be read or the model call fails, the error is printed and the file is listed with
an empty summary. When the run finishes, the tool prints how many files got a new summary, how
many were skipped, and how long the run took. The command exits with status 1 when the server
cannot be reached, the model is missing, or the overview cannot be written.

The model's reply is cleaned before it is stored: headings, list items and preamble lines are
dropped, the remaining lines are joined into one, and the text is cut after two sentences.

## Output format

After a fixed header, each directory gets a section, with its files listed under it:

```markdown
## [deploy/](../deploy/)
- [service.yaml](../deploy/service.yaml): Defines the Kubernetes service for the API.
```

Files directly in the scanned directory are listed under `## [./](.././)`.

## Library use

The building blocks can also be imported on their own:

```python
from yamlreadme.markdown import find_yaml_files, parse_existing_summaries, write_markdown_summary
from yamlreadme.text import clean_summary, truncate_to_sentences
from yamlreadme.ollama import OllamaClient, OllamaError
from yamlreadme.cli import run_summarize_yaml

result = run_summarize_yaml("path/to/repository", regenerate=False, local_cache=False)
print(result.processed, result.skipped)
```

`run_summarize_yaml` returns a `ProcessResult` with the `summaries` (keyed by file path) and the
`processed` and `skipped` counts. It accepts a `client` argument: any object with
`list_models()` and `chat(model, messages, options)` methods can stand in for `OllamaClient`.

`OllamaClient.from_environment()` builds a client from `OLLAMA_HOST`; `list_models()` returns the
names of the available models and `chat()` sends a non-streaming chat request and returns the
reply text. Server and connection failures raise `OllamaError`.

## Development

```
pip install -e ".[test]"
pytest
```