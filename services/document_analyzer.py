# DEPENDENCIES
from typing import Any
from typing import Dict
from typing import List
from typing import Union
from pathlib import Path
from typing import Mapping
from typing import Callable
from typing import Iterable
from typing import Optional
from datetime import datetime
from concurrent.futures import ThreadPoolExecutor

from utils.logger import log_info
from utils.logger import log_error
from utils.logger import log_warning
from config.settings import settings
from utils.result_cache import ResultCache
from utils.exceptions import AnalyzerError
from utils.logger import DocumentAnalyzerLogger
from utils.validators import InputValidator
from utils.text_processor import TextProcessor
from services.summary_generator import Summarizer
from services.data_models import AnalysisResult
from services.data_models import BatchItemResult
from services.risk_analyzer import RiskAnalyzer
from utils.exceptions import UnsupportedFormatError
from config.analysis_options import AnalysisOptions
from services.clause_extractor import ClauseDetector
from services.contract_classifier import DocumentTypeClassifier


OptionsInput = Optional[Union[AnalysisOptions, Mapping[str, Any]]]


class DocumentAnalyzer:
    """
    Runs the analysis pipeline over one document's extracted text and assembles the unified result

    Pipeline (the four stages are independent and may run in parallel):
    1. Document type classification
    2. Clause detection
    3. Summarisation
    4. Risk analysis
    """
    def __init__(self, options: OptionsInput = None, parallel: Optional[bool] = None, max_workers: Optional[int] = None, cache: Optional[ResultCache] = None):
        """
        Initialize the analyzer

        Arguments:
        ----------
            options     { AnalysisOptions | dict } : Default options for every call

            parallel             { bool }          : Run the four stages in a thread pool (defaults to settings.PARALLEL_STAGES)

            max_workers          { int }           : Thread pool size for stages and batches (defaults to settings.MAX_WORKERS)

            cache            { ResultCache }       : Cache for analyze_file(), created from settings when ENABLE_CACHE is set
        """
        self.options         = InputValidator.validate_options(options)
        self.parallel        = settings.PARALLEL_STAGES if parallel is None else parallel
        self.max_workers     = max_workers or settings.MAX_WORKERS

        if (cache is None) and settings.ENABLE_CACHE:
            cache = ResultCache()

        self.cache           = cache

        self.classifier      = DocumentTypeClassifier()
        self.clause_detector = ClauseDetector(min_sentence_length = settings.CLAUSE_MIN_SENTENCE_LENGTH)
        self.risk_analyzer   = RiskAnalyzer()

        log_info("DocumentAnalyzer initialized",
                 parallel      = self.parallel,
                 max_workers   = self.max_workers,
                 cache_enabled = self.cache is not None,
                )


    @DocumentAnalyzerLogger.log_execution_time("analyze_document")
    def analyze(self, text: str, options: OptionsInput = None, metadata: Optional[Dict[str, Any]] = None) -> AnalysisResult:
        """
        Analyze one document

        Arguments:
        ----------
            text             { str }             : Extracted plain text

            options { AnalysisOptions | dict }   : Per-call override of the default options

            metadata         { dict }            : Caller metadata merged into the result (core keys take precedence)

        Returns:
        --------
                   { AnalysisResult }            : Summary, clauses, risks and metadata
        """
        try:
            InputValidator.validate_text(text)
            analysis_options = self._resolve_options(options)

        except AnalyzerError as e:
            log_error(e, context = {"component" : "DocumentAnalyzer", "operation" : "analyze"})
            raise

        return self._analyze(text     = text,
                             options  = analysis_options,
                             metadata = metadata,
                             parallel = self.parallel,
                            )


    @DocumentAnalyzerLogger.log_execution_time("analyze_file")
    def analyze_file(self, file_path: Union[str, Path], options: OptionsInput = None) -> AnalysisResult:
        """
        Analyze a UTF-8 plain-text file, consulting the result cache when one is configured

        Arguments:
        ----------
            file_path         { str | Path }     : Path to a .txt / .text / .md file

            options { AnalysisOptions | dict }   : Per-call override of the default options

        Returns:
        --------
                   { AnalysisResult }            : Result with file metadata merged in
        """
        try:
            path             = InputValidator.validate_file(file_path)
            analysis_options = self._resolve_options(options)

        except AnalyzerError as e:
            log_error(e, context = {"component" : "DocumentAnalyzer", "operation" : "analyze_file", "file_path" : str(file_path)})
            raise

        cache_key = None

        if self.cache is not None:
            cache_key = self.cache.cache_key(path, analysis_options.model_dump(mode = "json"))
            cached    = self.cache.get(cache_key)

            if cached is not None:
                return cached

        try:
            text = path.read_text(encoding = "utf-8")

        except UnicodeDecodeError as e:
            error = UnsupportedFormatError(f"File is not valid UTF-8 text: {path.name}", details = {"file_path" : str(path)})
            log_error(error, context = {"component" : "DocumentAnalyzer", "operation" : "analyze_file"})
            raise error from e

        file_stat = path.stat()
        metadata  = {"file_name"       : path.name,
                     "file_path"       : str(path),
                     "file_size_bytes" : file_stat.st_size,
                     "modified_at"     : datetime.fromtimestamp(file_stat.st_mtime).isoformat(),
                     "processed_at"    : datetime.now().isoformat(),
                    }

        result    = self._analyze(text     = text,
                                  options  = analysis_options,
                                  metadata = metadata,
                                  parallel = self.parallel,
                                 )

        if cache_key is not None:
            self.cache.set(cache_key, result)

        return result


    @DocumentAnalyzerLogger.log_execution_time("analyze_batch")
    def analyze_batch(self, texts: Iterable[str], options: OptionsInput = None) -> List[BatchItemResult]:
        """
        Analyze many documents concurrently, preserving input order

        A document that fails input validation yields an unsuccessful item; the other documents are unaffected

        Arguments:
        ----------
            texts             { iterable }       : Extracted plain texts

            options { AnalysisOptions | dict }   : Options shared by every document

        Returns:
        --------
                      { list }                   : One BatchItemResult per input, same order
        """
        analysis_options = self._resolve_options(options)
        documents        = list(texts)

        def analyze_one(index: int) -> BatchItemResult:
            try:
                result = self._analyze(text     = InputValidator.validate_text(documents[index]),
                                       options  = analysis_options,
                                       metadata = {"batch_index" : index},
                                       parallel = False,
                                      )

                return BatchItemResult(index = index, success = True, result = result)

            except AnalyzerError as e:
                log_error(e, context = {"component" : "DocumentAnalyzer", "operation" : "analyze_batch", "batch_index" : index})

                return BatchItemResult(index = index, success = False, error = e.to_dict())

        with ThreadPoolExecutor(max_workers = self.max_workers) as executor:
            results = list(executor.map(analyze_one, range(len(documents))))

        failed = [item.index for item in results if not item.success]

        if failed:
            log_warning("Batch analysis finished with failures",
                        total          = len(results),
                        failed_indices = failed,
                       )

        else:
            log_info("Batch analysis complete", total = len(results))

        return results


    def _resolve_options(self, options: OptionsInput) -> AnalysisOptions:
        if options is None:
            return self.options

        return InputValidator.validate_options(options)


    def _analyze(self, text: str, options: AnalysisOptions, metadata: Optional[Dict[str, Any]], parallel: bool) -> AnalysisResult:
        """
        Run the four stages and merge their outputs
        """
        summarizer = Summarizer(options = options)

        stages     = {"document_type" : self.classifier.classify,
                      "clauses"       : self.clause_detector.detect,
                      "summary"       : summarizer.summarize,
                      "risks"         : self.risk_analyzer.analyze,
                     }

        outputs    = self._run_stages(stages, text, parallel)
        summary    = outputs["summary"]

        core_metadata = {"document_type"   : outputs["document_type"].value,
                         "word_count"      : TextProcessor.count_words(text),
                         "character_count" : len(text),
                         "sentence_count"  : len(summarizer.segmenter.segment(text)),
                         "summary_ratio"   : summary.summary_ratio,
                         "language"        : options.language,
                        }

        result        = AnalysisResult(plain_text = summary.plain_text,
                                       key_points = summary.key_points,
                                       clauses    = outputs["clauses"],
                                       risks      = outputs["risks"],
                                       metadata   = {**(metadata or {}), **core_metadata},
                                      )

        log_info("Document analysis complete",
                 document_type = core_metadata["document_type"],
                 word_count    = core_metadata["word_count"],
                 risk_level    = result.risks.risk_score.level.value,
                )

        return result


    def _run_stages(self, stages: Dict[str, Callable[[str], Any]], text: str, parallel: bool) -> Dict[str, Any]:
        if not parallel:
            return {name : stage(text) for name, stage in stages.items()}

        with ThreadPoolExecutor(max_workers = min(self.max_workers, len(stages))) as executor:
            futures = {name : executor.submit(stage, text) for name, stage in stages.items()}

            return {name : future.result() for name, future in futures.items()}
