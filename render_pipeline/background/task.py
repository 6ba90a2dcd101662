import threading


class Task:
    def __init__(self, task_code, *args):
        self.task_code = task_code
        self.args = args

    def run(self):
        self.task_code(*self.args)
        self.task_code = None
        self.args = None


class TaskRunner:
    """다른 스레드(타이머)에서 예약한 Task를 호스트 스레드에서 순서대로 실행"""

    def __init__(self):
        self.tasks = []
        self.condition = threading.Condition()

    def schedule_task(self, task):
        with self.condition:
            self.tasks.append(task)
            self.condition.notify_all()

    def has_pending(self):
        with self.condition:
            return bool(self.tasks)

    def run(self):
        task = None
        with self.condition:
            if self.tasks:
                task = self.tasks.pop(0)

        if task:
            task.run()
        return task is not None

    def run_all(self):
        count = 0
        while self.run():
            count += 1
        return count
