from minilisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
