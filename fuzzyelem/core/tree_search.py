"""
并发树搜索 - 从锚点出发在目标文档中寻找最相似的元素

每个被访问的节点都是一个独立的任务，提交到有界线程池执行:
1. 计算节点分数
2. 分数高于候选阈值 → 以带索引路径放入候选队列
3. 分数高于确定阈值或已到最大深度 → 不再访问子节点
4. 否则为每个子元素提交新任务（深度 +1）

任务从不等待子任务，只负责提交；调用方通过计数器等待全部任务结束后，
再对候选队列做一次最大值归约。

同分候选的取舍: 取先进入队列的那个。任务完成顺序不确定，
因此多个同分最佳候选之间的选择不保证稳定，只保证分数是最大值。
"""

import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple

from bs4 import Tag

from fuzzyelem import config as settings
from fuzzyelem.config import SearchConfig
from fuzzyelem.core.element_scorer import ElementScorer
from fuzzyelem.core.path_builder import PathBuilder
from fuzzyelem.domain.entities import ScoredCandidate, SearchResult
from fuzzyelem.utils.logger import get_logger

logger = get_logger(__name__)


class WaitGroup:
    """
    任务计数器

    add() 在提交前调用，done() 在任务结束时调用，
    wait() 阻塞直到计数归零。
    """

    def __init__(self):
        self._count = 0
        self._cond = threading.Condition()

    def add(self, n: int = 1):
        with self._cond:
            self._count += n

    def done(self):
        with self._cond:
            self._count -= 1
            if self._count <= 0:
                self._cond.notify_all()

    def wait(self):
        with self._cond:
            while self._count > 0:
                self._cond.wait()


class _SearchRun:
    """单次搜索的运行状态（候选队列、计数器、错误列表）"""

    def __init__(self, scorer: ElementScorer, config: SearchConfig, executor: ThreadPoolExecutor):
        self.scorer = scorer
        self.config = config
        self.executor = executor
        self.candidates: "queue.Queue[ScoredCandidate]" = queue.Queue()
        self.wait_group = WaitGroup()
        self.errors: List[BaseException] = []
        self.visited = 0
        self._lock = threading.Lock()

    def spawn(self, node: Tag, depth: int):
        self.wait_group.add()
        try:
            self.executor.submit(self.visit, node, depth)
        except RuntimeError:
            self.wait_group.done()
            raise

    def visit(self, node: Tag, depth: int):
        try:
            score = self.scorer.score(node)
            with self._lock:
                self.visited += 1

            if score > self.config.possible_similarity_threshold:
                path = PathBuilder.full_path(node, with_index=True)
                self.candidates.put(ScoredCandidate(path=path, score=score, depth=depth))
                logger.debug(f"候选: {path} (分数:{score}, 深度:{depth})")

            if score > self.config.certain_similarity_threshold:
                return
            if depth >= self.config.max_depth_from_root:
                return

            for child in node.children:
                if isinstance(child, Tag):
                    self.spawn(child, depth + 1)
        except Exception as e:
            with self._lock:
                self.errors.append(e)
        finally:
            self.wait_group.done()

    def drain(self) -> List[ScoredCandidate]:
        collected = []
        while True:
            try:
                collected.append(self.candidates.get_nowait())
            except queue.Empty:
                return collected


class TreeSearch:
    """
    并发树搜索

    用法:
        scorer = ElementScorer(fingerprint)
        result = TreeSearch(scorer, config).run(anchor)
    """

    def __init__(self, scorer: ElementScorer, config: Optional[SearchConfig] = None):
        """
        Args:
            scorer: 元素评分器
            config: 搜索配置，默认使用全局 search_config
        """
        self.scorer = scorer
        self.config = config or settings.search_config

    def collect(self, anchor: Tag) -> Tuple[List[ScoredCandidate], int]:
        """
        从锚点出发访问子树，收集全部候选

        Args:
            anchor: 搜索起点（深度 0）

        Returns:
            (候选列表（进入队列的顺序）, 已访问节点数)

        Raises:
            任一任务中的异常，在所有任务结束后重新抛出
        """
        with ThreadPoolExecutor(max_workers=self.config.worker_count) as executor:
            run = _SearchRun(self.scorer, self.config, executor)
            run.spawn(anchor, 0)
            run.wait_group.wait()

        if run.errors:
            raise run.errors[0]

        return run.drain(), run.visited

    def run(self, anchor: Optional[Tag]) -> SearchResult:
        """
        执行搜索并归约出分数最高的候选

        Args:
            anchor: 搜索起点，None 表示锚点未找到

        Returns:
            SearchResult，未找到时 path 为空字符串
        """
        if anchor is None:
            return SearchResult.empty()

        candidates, visited = self.collect(anchor)
        best = self.reduce(candidates)

        logger.info(f"访问 {visited} 个节点, 候选 {len(candidates)} 个")

        if best is None:
            return SearchResult(visited=visited)
        return SearchResult(
            path=best.path,
            score=best.score,
            visited=visited,
            candidates=len(candidates),
        )

    @staticmethod
    def reduce(candidates: List[ScoredCandidate]) -> Optional[ScoredCandidate]:
        """取分数严格最高的候选，同分保留先出现的"""
        best: Optional[ScoredCandidate] = None
        for candidate in candidates:
            if best is None or candidate.score > best.score:
                best = candidate
        return best
