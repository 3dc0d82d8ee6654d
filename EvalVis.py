from graphviz import Digraph

from Evaluator import Evaluator, Fold, HIGH, LOW


class EvalVis:
    _graph: Digraph
    debug: bool

    operand_color = "#00BFFF"
    high_color = "#D2691E"
    low_color = "#40E0D0"
    result_color = "#FF69B4"

    def __init__(self, filename: str = "graph/out.dot",
                 debug: bool = False) -> None:
        self._graph = Digraph('structs', filename=filename,
                              node_attr={'shape': 'record'})
        self.debug = debug
        self._drawn = 0

    def _name(self, node_id: str) -> str:
        # Keeps node names unique when several expressions share a graph
        return f"e{self._drawn}_{node_id}"

    def _operand(self, node_id: str, value: int, g: Digraph) -> None:
        g.node(self._name(node_id), f"{{{node_id}|{value}}}",
               color=EvalVis.operand_color)

    def _fold(self, fold: Fold, g: Digraph, last: bool) -> None:
        label = f"{{{fold.id}|{{{fold.lhs}|{fold.op}|{fold.rhs}}}|{fold.result}}}"
        if last:
            g.node(self._name(fold.id), label, color=EvalVis.result_color,
                   style="bold")
        else:
            g.node(self._name(fold.id), label)

    def _edges(self, fold: Fold) -> None:
        color = EvalVis.high_color if fold.phase == HIGH else EvalVis.low_color
        for side, src in (("lhs", fold.lhs_id), ("rhs", fold.rhs_id)):
            if self.debug:
                self._graph.edge(self._name(src) + ":s",
                                 self._name(fold.id) + ":n", label=side,
                                 color=color, fontcolor=color)
            else:
                self._graph.edge(self._name(src) + ":s",
                                 self._name(fold.id) + ":n", color=color)

    def _phase(self, phase: str, folds: list, last: Fold) -> None:
        if not folds:
            return
        # Clusters need the "cluster" prefix to be drawn as boxes
        color = EvalVis.high_color if phase == HIGH else EvalVis.low_color
        with self._graph.subgraph(name=f"cluster_{self._drawn}_{phase}") as c:
            c.attr(color=color, style="dashed", fontcolor=color,
                   label="* and /" if phase == HIGH else "+ and -")
            for fold in folds:
                self._fold(fold, c, fold is last)

    def evaluation(self, evaluator: Evaluator, expression: str = None) -> None:
        self._drawn += 1
        if expression is not None:
            self._graph.node(self._name("expr"), expression, shape="plaintext")

        for idx, value in enumerate(evaluator.operands):
            self._operand(evaluator.leaf_id(idx), value, self._graph)

        last = evaluator.folds[-1] if evaluator.folds else None
        self._phase(HIGH, [f for f in evaluator.folds if f.phase == HIGH],
                    last)
        self._phase(LOW, [f for f in evaluator.folds if f.phase == LOW], last)

        for fold in evaluator.folds:
            self._edges(fold)

    def source(self) -> str:
        return self._graph.source

    def save(self) -> str:
        return self._graph.save()

    def render(self):
        self._graph.render()
